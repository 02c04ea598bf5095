"""Local copy of the axe-core script injected into audited pages."""

import logging
from pathlib import Path

import aiohttp

from a11y_audit.config import RunConfig
from a11y_audit.errors import AnalysisError

log = logging.getLogger(__name__)

SCRIPT_NAME = "axe.min.js"


def cached_script_path(config: RunConfig) -> Path:
    """Return where the axe-core script is cached for this configuration."""
    return config.axe_cache_dir / SCRIPT_NAME


async def ensure_axe_script(config: RunConfig) -> Path:
    """Return a local path to axe-core, downloading it on first use.

    Raises:
        AnalysisError: If the script cannot be downloaded or stored

    """
    path = cached_script_path(config)
    if path.exists() and path.stat().st_size > 0:
        log.debug("Using cached axe-core script: %s", path)
        return path

    log.info("Downloading axe-core from %s", config.axe_script_url)
    timeout = aiohttp.ClientTimeout(total=config.axe_download_timeout_s)
    try:
        async with (
            aiohttp.ClientSession(timeout=timeout) as session,
            session.get(config.axe_script_url) as response,
        ):
            if response.status != 200:
                text = await response.text()
                raise AnalysisError(
                    f"Failed to download axe-core: {response.status} {text}"
                )
            content = await response.read()
    except TimeoutError as exc:
        raise AnalysisError(
            f"Timed out after {config.axe_download_timeout_s}s downloading axe-core"
        ) from exc
    except aiohttp.ClientError as exc:
        raise AnalysisError(f"Failed to download axe-core: {exc}") from exc

    if not content.strip():
        raise AnalysisError(
            f"Downloaded axe-core script is empty: {config.axe_script_url}"
        )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
    except OSError as exc:
        raise AnalysisError(f"Failed to cache axe-core at {path}: {exc}") from exc

    return path
