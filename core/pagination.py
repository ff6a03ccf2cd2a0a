from rest_framework.pagination import PageNumberPagination


class StandardResultsSetPagination(PageNumberPagination):
    """
    Page-number pagination that honours a client supplied ``page_size``.
    """

    page_size = 50
    page_size_query_param = "page_size"
    max_page_size = 500
