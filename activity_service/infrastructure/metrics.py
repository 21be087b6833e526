from prometheus_client import Counter, Histogram, generate_latest
from fastapi import Response

# HTTP
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Domain
user_registrations_total = Counter('user_registrations_total', 'Total successful registrations')
logins_total = Counter('logins_total', 'Login attempts', ['outcome'])
activity_joins_total = Counter('activity_joins_total', 'Total successful activity joins')

def metrics_endpoint():
    """Prometheus exposition of the default registry"""
    return Response(content=generate_latest(), media_type="text/plain")
