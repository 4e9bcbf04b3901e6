"""Pimcore -> Vue Storefront setup.

One-time installer:
- Environment-driven configuration, checked against the Pimcore class list
- config.json merged from config.example.json
- Importer steps run in a fixed order, stopping at the first failure
- Log files under var/log, degrading to no logs when they cannot be created
"""

__all__ = []
