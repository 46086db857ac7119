"""Cars — Driver record model and its field validation engine."""
