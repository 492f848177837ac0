"""Main entry point for the fibs command line."""

import logging
import sys

from .benchmark import Benchmark
from .config import AppConfig, get_app_config
from .numeric import get_numeric_type
from .sequence import f
from .table import SequenceTableBuilder

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Configure logging level.

    Args:
        level: Name of the root logging level
    """
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))


def print_summary(title: str, body: str):
    """Print a titled block of output."""
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)
    print(body)
    print("=" * 80)


def run_term(config: AppConfig) -> str:
    numeric = get_numeric_type(config.numeric_type)
    result = f(config.index, numeric)
    if result.is_ok():
        return f"F({config.index}) = {result.value}"
    return (
        f"F({config.index}) does not fit {numeric.name}; "
        f"largest is F({result.max_n}) = {result.max_value}"
    )


def run_sequence(config: AppConfig) -> str:
    numeric = get_numeric_type(config.numeric_type)
    df = SequenceTableBuilder(numeric).generate_dataframe(config.count)
    return df.to_string(index=False)


def run_bench(config: AppConfig) -> str:
    benchmark = Benchmark(iterations=config.bench_iterations)
    return Benchmark.to_dataframe(benchmark.run_all()).to_string(index=False)


RUNNERS = {
    "term": run_term,
    "sequence": run_sequence,
    "bench": run_bench,
}


def main():
    """Main execution function."""
    try:
        config = get_app_config()
        setup_logging(config.log_level)

        logger.info(f"Mode: {config.mode}")
        logger.info(f"Numeric type: {config.numeric_type}")

        output = RUNNERS[config.mode](config)
        print_summary(f"FIBONACCI {config.mode.upper()}", output)
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
