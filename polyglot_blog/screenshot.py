from __future__ import annotations

import re
from pathlib import Path

from .config_schema import ScreenshotConfig
from .errors import ScreenshotError

_NUMBERED_RE = re.compile(r"^screenshot-(\d+)")

# Scrolls in steps so IntersectionObserver reveals fire, then forces any
# remaining .reveal element visible and returns to the top.
_REVEAL_SCRIPT = """
async ([step, pause]) => {
  const sleep = (ms) => new Promise((r) => setTimeout(r, ms));
  const h = document.body.scrollHeight;
  for (let y = 0; y < h; y += step) {
    window.scrollTo(0, y);
    await sleep(pause);
  }
  window.scrollTo(0, h);
  await sleep(500);
  document.querySelectorAll('.reveal').forEach((el) => el.classList.add('visible'));
  window.scrollTo(0, 0);
}
"""


def next_screenshot_path(out_dir: str | Path, label: str = "") -> Path:
    folder = Path(out_dir)
    num = 1
    if folder.is_dir():
        for entry in folder.iterdir():
            m = _NUMBERED_RE.match(entry.name)
            if m:
                num = max(num, int(m.group(1)) + 1)

    tag = (label or "").strip()
    name = f"screenshot-{num}-{tag}.png" if tag else f"screenshot-{num}.png"
    return folder / name


def capture_screenshot(
    url: str,
    *,
    label: str = "",
    config: ScreenshotConfig | None = None,
    out_dir: str | Path | None = None,
) -> Path:
    cfg = config or ScreenshotConfig()
    folder = Path(out_dir if out_dir is not None else cfg.out_dir)

    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except Exception as e:
        raise ScreenshotError("playwright is required for screenshots") from e

    folder.mkdir(parents=True, exist_ok=True)
    path = next_screenshot_path(folder, label)

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True, args=["--no-sandbox"])
            try:
                page = browser.new_page(
                    viewport={"width": cfg.viewport_width, "height": cfg.viewport_height}
                )
                page.goto(url, wait_until="networkidle", timeout=cfg.navigation_timeout_ms)
                page.wait_for_timeout(cfg.settle_ms)
                page.evaluate(_REVEAL_SCRIPT, [cfg.scroll_step_px, cfg.scroll_pause_ms])
                page.wait_for_timeout(cfg.settle_ms)
                page.screenshot(path=str(path), full_page=True)
            finally:
                browser.close()
    except PlaywrightError as e:
        raise ScreenshotError(f"Failed to capture {url}: {e}") from e

    return path
