"""Run the fibbench CLI with python -m fibbench."""

from __future__ import annotations

from fibbench import main

main()
