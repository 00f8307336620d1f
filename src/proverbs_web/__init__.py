"""Flask API and single-page UI on top of proverbs.Engine."""
