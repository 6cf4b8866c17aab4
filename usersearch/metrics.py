from prometheus_client import Counter, Histogram

search_requests = Counter("search_client_requests_total", "Total number of user search calls", ["outcome"])
search_latency = Histogram("search_client_request_latency_seconds", "User search call latency in seconds")
search_users_returned = Histogram(
    "search_client_users_returned",
    "Number of users returned per successful search call",
    buckets=(0, 1, 5, 10, 15, 20, 25),
)
