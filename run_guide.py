from foldline.config import get_settings
from foldline.guide.examples import run_all
from foldline.guide.report import count_mismatches, render_guide
from foldline.logger.logger import reconfigure

if __name__ == "__main__":
    settings = get_settings()
    logger = reconfigure(settings.LOG_LEVEL, settings.LOG_FORMAT)

    # No number formatter is bundled, so the spelled scores example is skipped
    results = run_all()
    render_guide(results)

    mismatches = count_mismatches(results)
    if mismatches:
        logger.warning(f"{mismatches} of {len(results)} examples did not match")
    else:
        logger.info(f"All {len(results)} examples matched")
