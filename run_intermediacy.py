#!/usr/bin/env python3
"""Entry point for computing node intermediacy from the command line.

Chains the stages of a run into a single command:
graph loading -> reduction to intermediate nodes -> Monte Carlo estimation
per probability -> TSV table, JSON summary and optional figure.

Usage:
    python run_intermediacy.py -i nets/toy.net -s 1 -t 5
    python run_intermediacy.py -i cit.tsv -s 6687267 -t 1 -p 0.1,0.5,0.9 -z 1000000
    python run_intermediacy.py --config run.json --workers 4 --verbose
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field, replace
from pathlib import Path

import numpy as np
from dacite import DaciteError

from intermediacy.config import (
    ConfigurationError,
    DEFAULT_SAMPLING,
    RunConfig,
    config_from_json,
)
from intermediacy.graph import (
    Graph,
    GraphFormatError,
    LabelNotFoundError,
    induced,
    intermediate_nodes,
    read_graph,
)
from intermediacy.reporting import (
    print_intermediacy_table,
    print_network_summary,
    print_sampling_header,
    stage_timer,
)
from intermediacy.reproducibility import make_seed_sequence, spawn_seed_sequences
from intermediacy.results import (
    RESULT_SUFFIX,
    build_summary,
    write_phi_tsv,
    write_summary,
)
from intermediacy.sampling import IntermediacyEstimate, estimate_intermediacy

log = logging.getLogger(__name__)

DESCRIPTION = "Computes intermediacy of nodes for selected source and target nodes"


@dataclass
class PipelineResult:
    """Everything a run produced.

    ``phi`` has shape (len(probabilities), reduced.n) and is empty (shape
    (0, reduced.n)) when the reduced graph has at most two nodes, in which
    case no files are written.
    """

    graph: Graph
    reduced: Graph
    source: int  # index of the source in reduced (-1 if not intermediate)
    target: int  # index of the target in reduced (-1 if not intermediate)
    estimates: list[IntermediacyEstimate] = field(default_factory=list)
    tsv_path: Path | None = None
    summary_path: Path | None = None
    figure_paths: tuple[Path, ...] = ()

    @property
    def phi(self) -> np.ndarray:
        if not self.estimates:
            return np.zeros((0, self.reduced.n), dtype=np.float64)
        return np.stack([est.phi for est in self.estimates], axis=0)


def _reduced_index(nodes: np.ndarray, index: int) -> int:
    """Index of an original node inside the graph induced by nodes."""
    if not nodes[index]:
        return -1
    return int(nodes[:index].sum())


def run_pipeline(config: RunConfig) -> PipelineResult:
    """Execute a full intermediacy run.

    Args:
        config: Run configuration.

    Returns:
        PipelineResult with the reduced graph, estimates and output paths.

    Raises:
        LabelNotFoundError: If the source or target label is not in the graph.
    """
    input_path = Path(config.input_path)
    output_dir = (
        Path(config.output_dir) if config.output_dir else input_path.parent
    )
    sampling = config.sampling

    with stage_timer("NETWORK"):
        graph = read_graph(input_path)
        source = graph.find_node(config.source)
        target = graph.find_node(config.target)

        # Nodes off every source -> target path have intermediacy zero.
        nodes = intermediate_nodes(graph, source, target)
        reduced = induced(graph, nodes)
        print_network_summary(graph, reduced, config.source, config.target)

    result = PipelineResult(
        graph=graph,
        reduced=reduced,
        source=_reduced_index(nodes, source),
        target=_reduced_index(nodes, target),
    )

    if reduced.n <= 2:
        log.info(
            "Reduced graph has %d node(s); nothing to estimate for %d -> %d",
            reduced.n,
            config.source,
            config.target,
        )
        return result

    root_seed = make_seed_sequence(sampling.seed)
    probability_seeds = spawn_seed_sequences(
        root_seed, len(sampling.probabilities)
    )

    for probability, seed_seq in zip(sampling.probabilities, probability_seeds):
        with stage_timer("MONTE CARLO"):
            print_sampling_header(probability, sampling.samples)
            estimate = estimate_intermediacy(
                reduced,
                result.source,
                result.target,
                probability,
                sampling.samples,
                seed=seed_seq,
                workers=sampling.workers,
                chunk_size=sampling.chunk_size,
            )
            print_intermediacy_table(
                reduced, estimate, result.source, result.target
            )
        result.estimates.append(estimate)

    result.tsv_path = write_phi_tsv(
        reduced, sampling.probabilities, result.phi, output_dir
    )
    summary = build_summary(
        config, graph, reduced, result.estimates, root_seed.entropy
    )
    result.summary_path = write_summary(
        summary, output_dir / f"{graph.name}{RESULT_SUFFIX}"
    )

    if config.plot:
        from intermediacy.visualization import (
            plot_intermediacy_curves,
            save_figure,
        )

        fig = plot_intermediacy_curves(
            sampling.probabilities,
            result.phi,
            reduced.labels,
            sampling.samples,
            result.source,
            result.target,
        )
        result.figure_paths = save_figure(fig, output_dir, f"{graph.name}_phi")
        log.info("Figure written to %s", result.figure_paths[0])

    return result


def _parse_probabilities(value: str) -> tuple[float, ...]:
    try:
        return tuple(float(p) for p in value.split(",") if p.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"invalid probability list '{value}'"
        ) from e


def build_parser() -> argparse.ArgumentParser:
    default_p = ",".join(str(p) for p in DEFAULT_SAMPLING.probabilities)
    parser = argparse.ArgumentParser(description=DESCRIPTION)
    parser.add_argument(
        "-i", "--input", type=str, metavar="FILE",
        help="Pajek or TSV file (example: nets/toy.net)",
    )
    parser.add_argument(
        "-s", "--source", type=int, metavar="SOURCE",
        help="source node label (example: 1)",
    )
    parser.add_argument(
        "-t", "--target", type=int, metavar="TARGET",
        help="target node label (example: 5)",
    )
    parser.add_argument(
        "-p", "--probability", type=_parse_probabilities, metavar="LIST",
        help=f"edge probabilities (default: {default_p})",
    )
    parser.add_argument(
        "-z", "--samples", type=int, metavar="SAMPLES",
        help=f"Monte Carlo samples (default: {DEFAULT_SAMPLING.samples})",
    )
    parser.add_argument(
        "--seed", type=int,
        help="random seed (default: fresh entropy, logged for reuse)",
    )
    parser.add_argument(
        "--workers", type=int,
        help=f"worker processes (default: {DEFAULT_SAMPLING.workers})",
    )
    parser.add_argument(
        "--chunk-size", type=int,
        help=f"trials per seeded chunk (default: {DEFAULT_SAMPLING.chunk_size})",
    )
    parser.add_argument(
        "--output-dir", type=str,
        help="directory for result files (default: next to the input file)",
    )
    parser.add_argument(
        "--plot", action="store_true",
        help="also save a PNG/SVG figure of the intermediacy curves",
    )
    parser.add_argument(
        "--config", type=str,
        help="JSON run configuration; command-line options override it",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    """Merge an optional JSON config with command-line overrides.

    Raises:
        ConfigurationError: If required options are missing or values are
            out of range.
    """
    if args.config:
        config = config_from_json(Path(args.config).read_text())
    else:
        missing = [
            flag
            for flag, value in (
                ("-i/--input", args.input),
                ("-s/--source", args.source),
                ("-t/--target", args.target),
            )
            if value is None
        ]
        if missing:
            raise ConfigurationError(
                f"missing required options: {', '.join(missing)}"
            )
        config = RunConfig(
            input_path=args.input, source=args.source, target=args.target
        )

    overrides = {
        "input_path": args.input,
        "source": args.source,
        "target": args.target,
        "output_dir": args.output_dir,
    }
    config = replace(
        config, **{k: v for k, v in overrides.items() if v is not None}
    )
    if args.plot:
        config = replace(config, plot=True)

    sampling_overrides = {
        "probabilities": args.probability,
        "samples": args.samples,
        "seed": args.seed,
        "workers": args.workers,
        "chunk_size": args.chunk_size,
    }
    sampling_overrides = {
        k: v for k, v in sampling_overrides.items() if v is not None
    }
    if sampling_overrides:
        config = replace(
            config, sampling=replace(config.sampling, **sampling_overrides)
        )
    return config


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except (ConfigurationError, DaciteError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    if not Path(config.input_path).exists():
        print(f"Error: input file not found: {config.input_path}", file=sys.stderr)
        sys.exit(1)

    t0 = time.monotonic()
    try:
        result = run_pipeline(config)
    except (LabelNotFoundError, GraphFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception:
        log.exception("Run failed")
        sys.exit(1)

    print(f"\n{'=' * 60}")
    print(f"Run complete in {time.monotonic() - t0:.1f}s")
    print(f"  Nodes:    {result.reduced.n} intermediate of {result.graph.n}")
    if result.tsv_path is not None:
        print(f"  Table:    {result.tsv_path}")
        print(f"  Summary:  {result.summary_path}")
    else:
        print("  No Monte Carlo sampling needed (at most two intermediate nodes)")
    for path in result.figure_paths:
        print(f"  Figure:   {path}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
