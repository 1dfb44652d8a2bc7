"""Command-line front end for the Pronto provisioning API."""
