"""Run the API server with `python -m mantradex`."""

from mantradex.main import main

main()
