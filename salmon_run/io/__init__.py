"""I/O layer: level files, Parquet schemas and output paths."""
