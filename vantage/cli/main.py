"""
Vantage CLI - Inspect element paths and obstructed clicks from the shell.
"""

import logging
from contextlib import contextmanager

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from vantage import __version__

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@contextmanager
def _open_page(url, headless):
    """Start a browser, load the URL and close the browser afterwards."""
    from vantage.core.driver_factory import create_driver
    
    driver = create_driver(headless=headless)
    try:
        driver.get(url)
        yield driver
    finally:
        driver.quit()


def _build_config(library_url, injection_timeout, poll_interval):
    from vantage.core.config import HelperConfig
    
    return HelperConfig.from_env().with_overrides(
        library_url=library_url,
        injection_timeout=injection_timeout,
        poll_interval=poll_interval,
    )


@click.group()
@click.version_option(version=__version__, prog_name="vantage")
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(verbose):
    """🔭 Vantage - Element paths and obstructed-click helpers for Selenium."""
    _configure_logging(verbose)


@cli.command()
@click.argument('url')
@click.argument('selector')
@click.option('--headless/--headed', default=True, help='Run browser in headless mode')
def xpath(url, selector, headless):
    """
    Print the absolute XPath of the first element matching SELECTOR.
    
    \b
    Example:
    
        vantage xpath "https://example.com" "p > a"
    """
    from vantage.helpers import absolute_path
    
    try:
        with _open_page(url, headless) as driver:
            element = driver.find_element("css selector", selector)
            console.print(absolute_path(element))
    except Exception as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise SystemExit(1)


@cli.command(name="inspect")
@click.argument('url')
@click.argument('selector')
@click.option('--headless/--headed', default=True, help='Run browser in headless mode')
def inspect_page(url, selector, headless):
    """
    Report whether a click on SELECTOR would land on another element.
    
    \b
    Example:
    
        vantage inspect "https://example.com/shop" "#checkout"
    """
    from vantage.layers.sense.occlusion import OcclusionDetector
    
    try:
        with _open_page(url, headless) as driver:
            element = driver.find_element("css selector", selector)
            detector = OcclusionDetector(driver)
            report = detector.inspect(element, detector.viewport_point(element))
    except Exception as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise SystemExit(1)
    
    table = Table(show_header=False, box=None)
    table.add_row("[bold]Click point:[/bold]", f"({report.click_point.x}, {report.click_point.y})")
    table.add_row("[bold]Target:[/bold]", report.target_xpath)
    table.add_row("[bold]Hit:[/bold]", report.hit_xpath or "[dim]nothing[/dim]")
    table.add_row(
        "[bold]Verdict:[/bold]",
        "[red]Obstructed[/red]" if report.obstructed else "[green]Clear[/green]",
    )
    console.print(table)


@cli.command()
@click.argument('url')
@click.argument('selector')
@click.option('--headless/--headed', default=True, help='Run browser in headless mode')
@click.option('--library-url', default=None, help='Override the jQuery URL to inject')
@click.option('--injection-timeout', default=None, type=float,
              help='Seconds to wait for the injected library (default: 10)')
@click.option('--poll-interval', default=None, type=float,
              help='Seconds between readiness probes (default: 0.5)')
def center(url, selector, headless, library_url, injection_timeout, poll_interval):
    """
    Scroll SELECTOR to the middle of the viewport if it is obstructed.
    
    \b
    Example:
    
        vantage center "https://example.com/shop" "#checkout" --injection-timeout 20
    """
    from vantage.core.errors import InjectionTimeout
    from vantage.layers.action.centering import ViewportCenterer
    
    try:
        config = _build_config(library_url, injection_timeout, poll_interval)
        with _open_page(url, headless) as driver:
            element = driver.find_element("css selector", selector)
            result = ViewportCenterer(driver, config).bring_into_view(element)
    except InjectionTimeout as e:
        console.print(f"[red]❌ {e}[/red]")
        console.print("[dim]Try a larger --injection-timeout or a reachable --library-url[/dim]")
        raise SystemExit(2)
    except Exception as e:
        console.print(f"[red]❌ Error: {e}[/red]")
        raise SystemExit(1)
    
    if result.scrolled:
        console.print(f"[bold yellow]↕ Obstructed by {result.report.hit_xpath or 'nothing'}; "
                      f"scrolled to {result.scroll_top}[/bold yellow]")
    else:
        console.print("[bold green]✅ Not obstructed, viewport left untouched[/bold green]")
    console.print(f"[dim]Duration: {result.duration_ms:.0f}ms[/dim]")


@cli.command()
@click.option('--browser/--no-browser', default=False, help='Also try starting headless Chrome')
def doctor(browser):
    """
    Check that Selenium is installed and, optionally, that Chrome starts.
    """
    console.print(Panel.fit(
        f"[bold cyan]🩺 Vantage Doctor[/bold cyan]\n"
        f"[dim]System Health Check[/dim]",
        border_style="cyan"
    ))
    console.print()
    
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check", style="blue")
    table.add_column("Status", justify="center")
    
    all_good = True
    
    try:
        import selenium
        table.add_row("selenium", f"[green]✅ {selenium.__version__}[/green]")
    except ImportError:
        table.add_row("selenium", "[red]❌ Missing[/red]")
        all_good = False
    
    if browser and all_good:
        try:
            from vantage.core.driver_factory import create_driver
            driver = create_driver(headless=True)
            driver.quit()
            table.add_row("headless chrome", "[green]✅ Started[/green]")
        except Exception as e:
            table.add_row("headless chrome", f"[red]❌ {str(e).splitlines()[0]}[/red]")
            all_good = False
    
    console.print(table)
    console.print()
    
    if all_good:
        console.print("[bold green]✅ Vantage is ready.[/bold green]")
    else:
        console.print("[yellow]⚠️ Some checks failed.[/yellow]")
        raise SystemExit(1)


@cli.command()
def version():
    """Show version information."""
    console.print(f"Vantage v{__version__}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
