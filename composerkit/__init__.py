"""Form sections, tree models, entry validators and a Packagist client for composer.json editors."""

__version__ = "0.1.0"