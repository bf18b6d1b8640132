"""js-dependency-update.

A GitHub Action step that runs ``npm update``, detects manifest changes,
pushes them to a branch and opens a pull request.
"""

__version__ = "0.1.0"
