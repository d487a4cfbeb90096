"""SeedGen: pluggable test-input generators for fuzzing corpus seeding."""

__version__ = "0.1.0"
