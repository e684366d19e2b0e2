from __future__ import annotations

from dataclasses import dataclass, field

from asset_server.models.schemas import ProcessSnapshot


CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


@dataclass
class MetricFamily:
    name: str
    help: str
    type: str
    samples: list[tuple[dict[str, str], float]] = field(default_factory=list)

    def add(self, value: float, **labels: str) -> "MetricFamily":
        self.samples.append((labels, value))
        return self


def _format_value(value: float) -> str:
    if isinstance(value, int) or float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _escape_label(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def render_exposition(families: list[MetricFamily]) -> str:
    """Render metric families in the Prometheus text exposition format."""

    lines: list[str] = []
    for family in families:
        lines.append(f"# HELP {family.name} {family.help}")
        lines.append(f"# TYPE {family.name} {family.type}")
        for labels, value in family.samples:
            if labels:
                rendered = ",".join(f'{k}="{_escape_label(v)}"' for k, v in labels.items())
                lines.append(f"{family.name}{{{rendered}}} {_format_value(value)}")
            else:
                lines.append(f"{family.name} {_format_value(value)}")
        lines.append("")
    return "\n".join(lines)


def process_families(snapshot: ProcessSnapshot) -> list[MetricFamily]:
    memory = snapshot.memory
    return [
        MetricFamily(
            name="process_uptime_seconds",
            help="Process uptime in seconds",
            type="counter",
        ).add(snapshot.uptime_seconds),
        MetricFamily(
            name="process_memory_usage_bytes",
            help="Memory usage in bytes",
            type="gauge",
        )
        .add(memory.rss, type="rss")
        .add(memory.heap_total, type="heapTotal")
        .add(memory.heap_used, type="heapUsed")
        .add(memory.external, type="external"),
        MetricFamily(
            name="application_up",
            help="Application health status",
            type="gauge",
        ).add(1),
    ]


def render_process_metrics(snapshot: ProcessSnapshot) -> str:
    return render_exposition(process_families(snapshot))
