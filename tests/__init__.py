"""Tests for the cfbd-stats-mcp package.

Test modules:
- conftest.py: Shared fixtures (fake upstream client, fake clock, sample records)
- test_cache.py / test_teams.py / test_validation.py: utility layers
- test_client.py: CFBD HTTP client against httpx.MockTransport
- test_fetcher.py: the shared fetch template (cache, empty and error handling)
- test_dispatcher.py / test_rpc.py / test_server.py: protocol layers
- tools/: reshaping and wiring of each statistics tool

Run tests with:
    pytest tests/ -v

No test talks to the real CFBD API.
"""
