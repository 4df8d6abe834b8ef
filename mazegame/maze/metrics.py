from typing import Dict

from .graph import PassageGraph
from .solver import SolveResult, distances
from .topology import Coord


def init_metrics() -> Dict[str, int | float]:
    return {
        "cells": 0,
        "passages": 0,
        "dead_ends": 0,
        "components": 0,
        "reachable_cells": 0,
        "path_length": 0,
        "runtime_ms": 0.0,
    }


def collect_metrics(graph: PassageGraph, start: Coord, result: SolveResult) -> Dict[str, int | float]:
    metrics = init_metrics()
    metrics["cells"] = graph.height * graph.width
    metrics["passages"] = graph.edge_count()
    metrics["dead_ends"] = sum(1 for c in graph.cells() if len(graph.directions(c)) == 1)
    seen = set()
    components = 0
    for cell in graph.cells():
        if cell in seen:
            continue
        components += 1
        seen.update(distances(graph, cell))
    metrics["components"] = components
    metrics["reachable_cells"] = len(distances(graph, start))
    metrics["path_length"] = len(result.path) if result.solvable else 0
    return metrics
