"""Domain layer (pure logic).

- Keep 2048 board rules and session rules here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no logging.
- Randomness is passed in as an argument (``rng``), never a module global.
"""
