"""
UpGuard API module tests.

Pagination is the part most likely to regress. Coverage includes:
- Single page, multi-page and empty result sets
- The extra fetch after a final page of exactly per_page records
- Filter handling in the query string
- Errors mid-pagination (API errors, transport failures)
- Error body normalization in the dispatcher
"""
