"""Core building blocks for hashext: exceptions, configuration models and settings."""
