"""Route Modules — one file per resource/concern."""
