"""
Entry point for running the Pronto provisioning CLI as a module.

Usage:
    python -m cli issuer-data PASS-001 --environment staging
    python -m cli passes 1234 --environment development:localhost:3000
"""

from .commands import main

if __name__ == "__main__":
    main()
