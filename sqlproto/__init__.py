"""Convert SQL CREATE TABLE schemas into table data and Protobuf service template data."""

__version__ = "0.1.0"