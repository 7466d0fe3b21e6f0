"""Allow running the server as: python -m crypto_signal.api."""

from crypto_signal.api.runner import main

main()
