"""Domain layer (pure logic).

- Daily target selection, hint evaluation, the game state machine and
  submission rules live here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no HR API calls.
- Dates and catalogs are passed in as arguments; nothing reads the clock.
"""
