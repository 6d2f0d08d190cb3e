"""Infrastructure shared by the services: settings, logging, storage and security."""
