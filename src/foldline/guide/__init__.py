"""Worked examples of the collection transforms and their rendering."""

from foldline.guide.examples import EXAMPLES, GuideExample, GuideResult, run_all

__all__ = ["EXAMPLES", "GuideExample", "GuideResult", "run_all"]
