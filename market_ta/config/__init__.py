"""
Configuration module.

Default indicator parameters, YAML-backed overrides and parameter validation.
"""
