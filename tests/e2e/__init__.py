"""End-to-end tests against the live TheTVDB service.

Usage:
    TVDBCLIENT_E2E_TESTS=1 TVDB_API_KEY=... pytest tests/e2e/

Test markers:
- @pytest.mark.e2e: All end-to-end tests
- @pytest.mark.api: Tests requiring a real API key
"""
