"""Argument parsing performance benchmarks."""

import io
import statistics
import time

from credhelper import OperationArguments

TYPICAL_INPUT = (
    b"protocol=https\n"
    b"host=example.visualstudio.com\n"
    b"path=org/project/_git/repo\n"
    b"username=userName\n"
    b"password=incorrect\n"
    b"\n"
)


def test_parse_latency() -> None:
    """Benchmark parsing a typical request."""
    latencies = []
    for _ in range(1000):
        start = time.perf_counter()
        OperationArguments(io.BytesIO(TYPICAL_INPUT))
        latencies.append(time.perf_counter() - start)

    avg = statistics.mean(latencies) * 1000
    p95 = statistics.quantiles(latencies, n=20)[18] * 1000

    print("\n[PERF] Argument parsing (n=1000):")
    print(f"  Avg: {avg:.4f}ms")
    print(f"  P95: {p95:.4f}ms")

    assert avg < 1.0, "Parsing should be <1ms"


def test_round_trip_latency() -> None:
    """Benchmark parse, target URI and serialize together."""
    latencies = []
    for _ in range(1000):
        start = time.perf_counter()
        args = OperationArguments(io.BytesIO(TYPICAL_INPUT))
        str(args.target_uri)
        args.to_bytes()
        latencies.append(time.perf_counter() - start)

    avg = statistics.mean(latencies) * 1000

    print("\n[PERF] Round trip (n=1000):")
    print(f"  Avg: {avg:.4f}ms")

    assert avg < 2.0
