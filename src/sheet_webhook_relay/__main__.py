"""Module entry point for `python -m sheet_webhook_relay`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
