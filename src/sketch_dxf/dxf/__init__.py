"""DXF serialization: formatter, encoders, dispatcher and document assembly."""
