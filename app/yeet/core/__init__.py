"""Core building blocks: paths, errors, configuration and theming."""
