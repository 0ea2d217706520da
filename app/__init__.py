"""Study Tracker backend package."""
