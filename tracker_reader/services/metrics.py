from shared.metrics import get_counter, get_histogram

SERVICE = "tracker_reader"

READS = get_counter(
    "reads_total", "Store reads served, by operation", SERVICE, ["operation"]
)
READ_ERRORS = get_counter(
    "read_errors_total",
    "Store reads that raised, by operation",
    SERVICE,
    ["operation"],
)
READ_LATENCY = get_histogram(
    "read_latency_seconds",
    "Latency of store reads, by operation",
    SERVICE,
    ["operation"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 1.0],
)
