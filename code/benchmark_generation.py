#!/usr/bin/env python3
"""Benchmark dungeon generation speed and graph quality across many seeds.

Every run builds a dungeon from a seeded random source, then rebuilds the
accepted edges as a networkx graph to measure it independently of the
generator's own path finding.
"""

from __future__ import annotations

import argparse
import json
import math
import random
import statistics
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import networkx as nx

from dungeon import Dungeon
from dungeon_config import DungeonConfig
from dungeon_errors import DungeonGenerationError
from random_source import SeededRandom

PERCENTILES = [1.0, 5.0, 25.0, 50.0, 75.0, 95.0, 99.0]


@dataclass
class GenerationRunResult:
    seed: int
    duration: float
    succeeded: bool
    connected: bool = False
    edge_count: int = 0
    cycle_count: int = 0
    graph_diameter: int = 0
    endpoint_distance: int = 0
    cave_count: int = 0
    tunnel_count: int = 0
    treasure_caves: int = 0
    step_metrics: Optional[Dict[str, Dict[str, float | int]]] = None


def build_cell_graph(dungeon: Dungeon) -> nx.Graph:
    """Graph of cell ids joined by the dungeon's accepted edges."""
    graph = nx.Graph()
    graph.add_nodes_from(cell.id for cell in dungeon.cells())
    graph.add_edges_from(tuple(edge) for edge in dungeon.accepted_edges)
    return graph


def run_single_generation(config: DungeonConfig, seed: int) -> GenerationRunResult:
    """Build one dungeon with ``seed`` and measure it."""
    start = time.perf_counter()
    try:
        dungeon = Dungeon(config, SeededRandom(seed))
    except DungeonGenerationError:
        return GenerationRunResult(
            seed=seed, duration=time.perf_counter() - start, succeeded=False
        )
    duration = time.perf_counter() - start

    graph = build_cell_graph(dungeon)
    connected = nx.is_connected(graph)
    cells = list(dungeon.cells())
    return GenerationRunResult(
        seed=seed,
        duration=duration,
        succeeded=True,
        connected=connected,
        edge_count=graph.number_of_edges(),
        cycle_count=len(nx.cycle_basis(graph)),
        graph_diameter=int(nx.diameter(graph)) if connected else 0,
        endpoint_distance=int(
            nx.shortest_path_length(graph, dungeon.start.id, dungeon.destination.id)
        ),
        cave_count=sum(1 for cell in cells if cell.is_cave),
        tunnel_count=sum(1 for cell in cells if cell.is_tunnel),
        treasure_caves=sum(1 for cell in cells if cell.treasures),
        step_metrics=dungeon.metrics.snapshot() if dungeon.metrics else None,
    )


def run_benchmark(config: DungeonConfig, num_runs: int, seed: int | None) -> List[GenerationRunResult]:
    """Run the generator ``num_runs`` times with seeds drawn from one harness RNG."""
    rng = random.Random(seed)
    return [run_single_generation(config, rng.randint(0, 1_000_000)) for _ in range(num_runs)]


def percentile(values: List[float], pct: float) -> float:
    if not values:
        return float("nan")
    ordered = sorted(values)
    rank = (len(ordered) - 1) * (pct / 100.0)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    fraction = rank - lower
    return ordered[lower] + (ordered[upper] - ordered[lower]) * fraction


def compute_basic_stats(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "min": min(values),
        "max": max(values),
        "stdev": statistics.stdev(values) if len(values) > 1 else float("nan"),
    }


def format_seconds(value: float) -> str:
    if value >= 1.0:
        return f"{value:.3f}s"
    return f"{value * 1000:.2f}ms"


@dataclass
class MetricDefinition:
    key: str
    name: str
    values: List[float]
    value_formatter: Callable[[float], str] = lambda value: f"{value:.2f}"


def summarize_metric(definition: MetricDefinition) -> Dict[str, Any]:
    values = definition.values
    if not values:
        return {"count": 0}
    summary: Dict[str, Any] = {"count": len(values)}
    for key, value in compute_basic_stats(values).items():
        summary[key] = None if math.isnan(value) else value
    summary["percentiles"] = {f"p{pct:g}": percentile(values, pct) for pct in PERCENTILES}
    return summary


def report_metric(definition: MetricDefinition) -> None:
    print(definition.name + ":")
    if not definition.values:
        print("  (no data)")
        return
    fmt = definition.value_formatter
    stats = compute_basic_stats(definition.values)
    print(
        "  Count {count}, mean {mean}, median {median}, min {min}, max {max}".format(
            count=len(definition.values),
            mean=fmt(stats["mean"]),
            median=fmt(stats["median"]),
            min=fmt(stats["min"]),
            max=fmt(stats["max"]),
        )
    )
    parts = [f"p{pct:g}={fmt(percentile(definition.values, pct))}" for pct in PERCENTILES]
    print("  Percentiles: " + ", ".join(parts))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Run the dungeon generator many times and report timing and graph statistics."
    )
    parser.add_argument("rows", type=int)
    parser.add_argument("columns", type=int)
    parser.add_argument("interconnectivity", type=int)
    parser.add_argument("--wrapping", action="store_true")
    parser.add_argument("--treasure-percentage", type=float, default=25.0)
    parser.add_argument(
        "-n", "--runs", type=int, default=50, help="Number of generations to execute (default: 50)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the harness RNG; keeps run seeds reproducible",
    )
    parser.add_argument("--json", dest="json_path", default=None, help="Also write a JSON report here")
    args = parser.parse_args(argv)

    if args.runs <= 0:
        raise SystemExit("Number of runs must be a positive integer")

    config = DungeonConfig(
        rows=args.rows,
        columns=args.columns,
        interconnectivity=args.interconnectivity,
        wrapping=args.wrapping,
        treasure_percentage=args.treasure_percentage,
        player_name="benchmark",
        collect_metrics=True,
    )
    results = run_benchmark(config, args.runs, args.seed)
    succeeded = [result for result in results if result.succeeded]

    for idx, result in enumerate(results, start=1):
        if not result.succeeded:
            print(f"Run {idx:03d}: {format_seconds(result.duration)} (seed {result.seed}) | infeasible")
            continue
        print(
            "Run {idx:03d}: {time} (seed {seed}) | edges {edges}, cycles {cycles},"
            " diameter {diameter}, start-destination {distance}, caves {caves}/tunnels {tunnels}".format(
                idx=idx,
                time=format_seconds(result.duration),
                seed=result.seed,
                edges=result.edge_count,
                cycles=result.cycle_count,
                diameter=result.graph_diameter,
                distance=result.endpoint_distance,
                caves=result.cave_count,
                tunnels=result.tunnel_count,
            )
        )

    whole = lambda value: f"{value:.0f}"
    metrics = [
        MetricDefinition("generation_time", "Generation time", [r.duration for r in results], format_seconds),
        MetricDefinition("cycle_count", "Cycle basis size", [float(r.cycle_count) for r in succeeded], whole),
        MetricDefinition("graph_diameter", "Graph diameter", [float(r.graph_diameter) for r in succeeded], whole),
        MetricDefinition(
            "endpoint_distance",
            "Start-destination distance",
            [float(r.endpoint_distance) for r in succeeded],
            whole,
        ),
        MetricDefinition("tunnel_count", "Tunnels", [float(r.tunnel_count) for r in succeeded], whole),
        MetricDefinition("treasure_caves", "Treasure caves", [float(r.treasure_caves) for r in succeeded], whole),
    ]

    print()
    print(f"Runs: {len(results)}, infeasible: {len(results) - len(succeeded)}")
    disconnected = sum(1 for result in succeeded if not result.connected)
    if disconnected:
        print(f"WARNING: {disconnected} runs produced a disconnected dungeon")
    for metric in metrics:
        print()
        report_metric(metric)

    if args.json_path:
        report = {
            "parameters": {
                "rows": config.rows,
                "columns": config.columns,
                "interconnectivity": config.interconnectivity,
                "wrapping": config.wrapping,
                "treasure_percentage": config.treasure_percentage,
                "runs": args.runs,
                "seed": args.seed,
            },
            "aggregated_results": {metric.key: summarize_metric(metric) for metric in metrics},
            "results": [
                {
                    "seed": result.seed,
                    "succeeded": result.succeeded,
                    "duration_seconds": result.duration,
                    "step_metrics": result.step_metrics,
                }
                for result in results
            ],
        }
        with open(args.json_path, "w", encoding="utf-8") as handle:
            json.dump(report, handle, indent=2, sort_keys=True)
            handle.write("\n")
        print(f"\nSaved benchmark results to {args.json_path}")


if __name__ == "__main__":
    main()
