import csv
import io
import json

from rich.console import Console
from rich.markup import escape

from linkprobe.domain.crawl_report import CrawlReport
from linkprobe.domain.link_result import LinkResult, LinkState

CSV_FIELDS = ("url", "status", "state")

_STATE_STYLES = {
    LinkState.OK: "green",
    LinkState.BROKEN: "red",
    LinkState.SKIPPED: "grey50",
}


def to_json(report: CrawlReport, indent: int = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent)


def to_csv(report: CrawlReport) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS, lineterminator="\n")
    writer.writeheader()
    for link in report.links:
        writer.writerow({"url": link.url, "status": "" if link.status is None else link.status, "state": link.state.value})
    return buf.getvalue()


def status_label(result: LinkResult) -> str:
    if result.state == LinkState.SKIPPED:
        return "SKP"
    if result.status is None:
        return "ERR"
    return str(result.status)


class ConsoleReporter:
    """Prints crawl progress as links are checked.

    With `silent`, only BROKEN links are printed.
    """

    def __init__(self, console: Console, silent: bool = False):
        self.console = console
        self.silent = silent

    def on_page_start(self, url: str) -> None:
        if self.silent:
            return
        self.console.print(f"\n Scanning [grey50]{escape(url)}[/grey50]")

    def on_link(self, result: LinkResult) -> None:
        if self.silent and result.state != LinkState.BROKEN:
            return
        style = _STATE_STYLES[result.state]
        self.console.print(f"  \\[[{style}]{status_label(result)}[/{style}]] [grey50]{escape(result.url)}[/grey50]")

    def summary(self, report: CrawlReport, elapsed_seconds: float, error_console: Console) -> None:
        total = len(report.links)
        if report.passed:
            self.console.print(
                f"\n[bold]Successfully scanned [green]{total}[/green] links in [cyan]{elapsed_seconds:.2f}[/cyan] seconds.[/bold]"
            )
            return
        error_console.print(
            f"[bold][red]ERROR[/red]: Detected {len(report.broken)} broken links. "
            f"Scanned [yellow]{total}[/yellow] links in [cyan]{elapsed_seconds:.2f}[/cyan] seconds.[/bold]"
        )
