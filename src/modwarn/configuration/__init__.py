"""
Configuration management for modwarn.

- **app_configuration.py**: YAML configuration loader (``config/app_config.yml``)
  exposing the warnings file location, its JSON indent and the permission
  required to use the warning commands. Falls back to defaults on missing or
  malformed config files.
"""
