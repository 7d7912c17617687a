"""Core SDK building blocks: settings, exceptions and pagination."""
