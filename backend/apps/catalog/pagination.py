from rest_framework.pagination import PageNumberPagination


class ProductListPagination(PageNumberPagination):
    page_size = 12
    # ?limit= overrides the page size, capped below
    page_size_query_param = 'limit'
    max_page_size = 60
