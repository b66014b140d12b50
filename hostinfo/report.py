# hostinfo/report.py

import json
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from hostinfo import environment, runtime, system
from hostinfo.distro import detect_linux_distribution
from hostinfo.utils.errors import handle_errors
from hostinfo.utils.osdetect import get_os

logger = logging.getLogger(__name__)
console = Console()


def os_facts(root="/"):
    return {
        "family": get_os(root=root).name,
        "kernel_name": system.kernel_name(),
        "kernel_release": system.kernel_release(),
        "kernel_version": system.kernel_version(),
        "version": system.version(root),
        "architecture": system.architecture(),
        "is_64bit": system.is_64bit(),
        "hostname": system.hostname(),
    }


def distro_facts(root="/"):
    return dict(detect_linux_distribution(root))


def cpu_facts(root="/"):
    return {
        "architecture": system.architecture(),
        "logical_cores": system.cpu_count(logical=True),
        "physical_cores": system.cpu_count(logical=False),
    }


def memory_facts(root="/"):
    return {
        "total": system.total_memory(),
        "available": system.available_memory(),
    }


def runtime_facts(root="/"):
    return {
        "implementation": runtime.implementation(),
        "version": runtime.version(),
        "path": runtime.path(),
        "is_64bit": runtime.is_64bit(),
        "memory_usage": runtime.memory_usage(),
    }


def user_facts(root="/"):
    return {
        "user_name": environment.user_name(),
        "device_name": environment.device_name(),
        "current_directory": environment.current_directory(),
    }


SECTIONS = {
    "os": os_facts,
    "distro": distro_facts,
    "cpu": cpu_facts,
    "memory": memory_facts,
    "runtime": runtime_facts,
    "user": user_facts,
}


def collect(section: str = "all", root="/") -> dict:
    """Gather facts for one section, or every section keyed by name."""
    if section == "all":
        return {name: fn(root) for name, fn in SECTIONS.items()}
    if section not in SECTIONS:
        raise ValueError(f"unknown section: {section}")
    logger.debug("collecting %s facts (root=%s)", section, root)
    return {section: SECTIONS[section](root)}


def _format(key, value):
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if key in ("total", "available", "memory_usage") and isinstance(value, int):
        return "-" if value < 0 else f"{value / 1024 ** 3:.2f} GiB ({value} bytes)"
    return str(value)


def _section_table(name, facts):
    table = Table(title=f"[magenta]{name.capitalize()}[/magenta]", show_header=False)
    table.add_column("Fact", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for key, value in facts.items():
        table.add_row(key, _format(key, value))
    return table


@handle_errors
def show(section: str = "all", root="/", as_json: bool = False):
    data = collect(section, root)

    if as_json:
        sys.stdout.write(json.dumps(data, indent=2) + "\n")
        return

    for name, facts in data.items():
        if not facts:
            console.print(Panel.fit(
                f"[yellow]No {name} information available[/yellow]",
                border_style="yellow"
            ))
            continue
        console.print(_section_table(name, facts))
        console.print()
