"""Low-level helpers for MAC parsing and WoL packet delivery."""
