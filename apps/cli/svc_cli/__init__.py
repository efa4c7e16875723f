"""svc command line interface."""
