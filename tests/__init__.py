"""
Test Suite for Books API

Test Organization:
- conftest.py: Shared fixtures (fresh app, store, client)
- test_books.py: Tests for /api/books endpoints
- test_book_store.py: Tests for the BookStore service
- test_schemas.py: Tests for payload validation and error messages
- test_main.py: Tests for the root route, error handling and configuration

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
