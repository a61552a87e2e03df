"""Career Canvas — resume block editor and profile API."""
