"""Core of movie-tracker: domain, interfaces, services and configuration."""
