"""Bundled C# templates for the storage API client boilerplates."""
