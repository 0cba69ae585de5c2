"""Data-access layer: one repository per model on top of BaseRepository, plus read_models for joins."""
