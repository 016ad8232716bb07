"""Invoke tasks for the magnet-url project."""

from invoke import Context, task

SOURCES = "src/ tests/"


@task
def lint(ctx: Context) -> None:
    """Run ruff linter."""
    ctx.run(f"uv run ruff check {SOURCES}", pty=True)


@task
def format(ctx: Context, check: bool = False, fix: bool = False) -> None:
    """Run ruff formatter and optionally fix linting issues."""
    if fix:
        ctx.run(f"uv run ruff check --fix --unsafe-fixes {SOURCES}", pty=True)
        ctx.run(f"uv run ruff format {SOURCES}", pty=True)
    else:
        check_flag = "--check" if check else ""
        ctx.run(f"uv run ruff format {check_flag} {SOURCES}", pty=True)


@task
def test(ctx: Context, verbose: bool = True) -> None:
    """Run tests with pytest."""
    verbose_flag = "-v" if verbose else ""
    ctx.run(f"uv run pytest tests/ {verbose_flag}", pty=True)


@task
def check(ctx: Context) -> None:
    """Run all checks (lint, format check, tests)."""
    lint(ctx)
    format(ctx, check=True, fix=False)
    test(ctx)


@task
def mcp(ctx: Context, port: int = 8000) -> None:
    """Run the FastMCP server with HTTP transport."""
    ctx.run(f"uv run magnet-url-mcp --transport streamable-http --port {port}", pty=True)


SINTEL = (
    "magnet:?xt=urn:btih:08ada5a7a6183aae1e09d831df6748d566095a10&dn=Sintel"
    "&tr=udp%3A%2F%2Fexplodie.org%3A6969&tr=udp%3A%2F%2Ftracker.coppersurfer.tk%3A6969"
    "&tr=udp%3A%2F%2Ftracker.empire-js.us%3A1337&tr=udp%3A%2F%2Ftracker.leechers-paradise.org%3A6969"
    "&tr=udp%3A%2F%2Ftracker.opentrackr.org%3A1337&tr=wss%3A%2F%2Ftracker.btorrent.xyz"
    "&tr=wss%3A%2F%2Ftracker.fastcast.nz&tr=wss%3A%2F%2Ftracker.openwebtorrent.com"
    "&ws=https%3A%2F%2Fwebtorrent.io%2Ftorrents%2F&xs=https%3A%2F%2Fwebtorrent.io%2Ftorrents%2Fsintel.torrent"
)


@task
def bench(ctx: Context, number: int = 10000) -> None:
    """Time parsing and re-serializing the Sintel magnet link."""
    setup = f"from magnet_url import parse; uri = {SINTEL!r}; m = parse(uri)"
    ctx.run(f'uv run python -m timeit -n {number} -s "{setup}" "parse(uri)"', pty=True)
    ctx.run(f'uv run python -m timeit -n {number} -s "{setup}" "m.to_uri()"', pty=True)
