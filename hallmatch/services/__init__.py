"""Services - imperative shell around core/: settings, logging, checked entry points."""
