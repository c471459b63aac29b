#!/usr/bin/env python3
"""Benchmark suite for pyskiplist comparing against the builtin list."""

import argparse
import json
import random
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskiplist import SkipList

class Metrics:
    def __init__(self):
        self.insert_latencies: List[float] = []
        self.get_latencies: List[float] = []
        self.remove_latencies: List[float] = []

    def to_dict(self) -> Dict:
        return {
            name: {
                "p50": np.percentile(latencies, 50),
                "p95": np.percentile(latencies, 95),
                "p99": np.percentile(latencies, 99),
                "mean": np.mean(latencies),
            }
            for name, latencies in (
                ("insert_latencies", self.insert_latencies),
                ("get_latencies", self.get_latencies),
                ("remove_latencies", self.remove_latencies),
            )
        }

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()

        for name, latencies in (
            ("Insert Latency", self.insert_latencies),
            ("Get Latency", self.get_latencies),
            ("Remove Latency", self.remove_latencies),
        ):
            fig.add_trace(go.Box(
                y=latencies,
                name=name,
                boxpoints="outliers"
            ))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)

class BenchmarkSuite:
    def __init__(self, num_entries: int, seed: int):
        self.num_entries = num_entries
        rng = random.Random(seed)
        # Positions are drawn against the size the container has at that step.
        self._insert_positions = [rng.randint(0, i) for i in range(num_entries)]
        self._get_positions = [rng.randrange(num_entries) for _ in range(num_entries)]
        self._remove_positions = [rng.randrange(num_entries - i) for i in range(num_entries)]

    def run(self, name: str, container) -> Metrics:
        metrics = Metrics()
        # list.insert takes (index, value); SkipList.insert takes (value, index).
        insert = (lambda value, pos: container.insert(pos, value)) if isinstance(container, list) else container.insert

        for i in tqdm(range(self.num_entries), desc=f"{name} Insert"):
            pos = self._insert_positions[i]
            start = time.perf_counter()
            insert(i, pos)
            metrics.insert_latencies.append((time.perf_counter() - start) * 1e6)

        for pos in tqdm(self._get_positions, desc=f"{name} Get"):
            start = time.perf_counter()
            container[pos]
            metrics.get_latencies.append((time.perf_counter() - start) * 1e6)

        for pos in tqdm(self._remove_positions, desc=f"{name} Remove"):
            start = time.perf_counter()
            container.pop(pos)
            metrics.remove_latencies.append((time.perf_counter() - start) * 1e6)

        return metrics

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of entries")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the random positions")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.seed)
    skiplist_metrics = suite.run("SkipList", SkipList.with_capacity(args.size))
    list_metrics = suite.run("list", [])

    # Generate reports
    skiplist_metrics.plot_latencies(
        "SkipList Latency Distribution",
        args.output / "skiplist_latencies.html"
    )
    list_metrics.plot_latencies(
        "list Latency Distribution",
        args.output / "list_latencies.html"
    )

    # Save metrics
    with open(args.output / "metrics.json", "w") as f:
        json.dump({
            "skiplist": skiplist_metrics.to_dict(),
            "list": list_metrics.to_dict(),
        }, f, indent=2)

if __name__ == "__main__":
    main()
