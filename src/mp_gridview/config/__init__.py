"""Config – 12-factor settings and configuration errors."""
