"""Route blueprints for the stand-in platform."""
