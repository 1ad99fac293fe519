"""Input/output layer: map parsing and Parquet artifacts."""
