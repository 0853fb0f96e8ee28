import inspect
from collections.abc import Callable, Iterator
from types import ModuleType
from typing import Any

EXAMPLE_PREFIX = "example_"


async def run_examples(mod: ModuleType) -> None:
    """Run every example of a module in the order they are defined. Each run is preceded by a header line."""
    for name, example in iter_examples(mod):
        print(f"\n# running: {name}")
        outcome = example()
        if inspect.isawaitable(outcome):
            await outcome


def iter_examples(mod: ModuleType) -> Iterator[tuple[str, Callable[[], Any]]]:
    # Module dicts keep definition order
    for name, obj in vars(mod).items():
        if name.startswith(EXAMPLE_PREFIX) and inspect.isfunction(obj):
            yield name, obj
