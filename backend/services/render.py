"""HTML page for the guessing game. Every user-controlled string goes through html.escape."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from models import GuessRecord
from services.score_presenter import bar_width, present_score

PAGE_TITLE = "Word Guessing Game"

_STYLE = """
      body {
        font-family: Arial, sans-serif;
        background-color: #FAF3E0;
        color: #333;
        text-align: center;
        margin: 0;
        padding: 20px;
      }
      h1, h2 { color: #6A0572; }
      input[type="text"] {
        padding: 10px;
        margin: 10px 0;
        border-radius: 5px;
        border: 1px solid #6A0572;
      }
      button {
        padding: 10px;
        background-color: #6A0572;
        color: white;
        border: none;
        border-radius: 5px;
        cursor: pointer;
      }
      button:hover { background-color: #9B59B6; }
      p { margin: 10px 0; }
      .error { color: red; }
      .history-entry { width: 100%; margin: 5px 0; }
      .bar { background-color: #77DD77; height: 20px; border-radius: 5px; }
"""


def _history_entry(record: GuessRecord) -> str:
    return (
        '<div class="history-entry">'
        f'<div class="bar" style="width: {bar_width(record.score)}%;"></div>'
        f"<span>{escape(record.guess)} - Score: {record.score}</span>"
        "</div>"
    )


def _result_block(guess: str, score: float | None, error: str | None) -> str:
    if error:
        return f'<p class="error">Error: {escape(error)}</p>'
    if score is None:
        return ""
    display = present_score(score, guess)
    return (
        f"<p>Similarity score: {score}</p>\n"
        f'<p class="band-{display.band.value}">{escape(display.message)}</p>'
    )


def _hint_block(show_hint: bool, category: str | None) -> str:
    if show_hint and category:
        return f'<p class="hint">Hint: the word belongs to the category <strong>{escape(category)}</strong>.</p>'
    # Only toggles the hint; the previous guess is not resubmitted.
    return '<p><a href="?hint">Show a hint</a></p>'


def render_page(
    *,
    guess: str = "",
    score: float | None = None,
    error: str | None = None,
    show_hint: bool = False,
    category: str | None = None,
    history: Sequence[GuessRecord] = (),
) -> str:
    """Render the full page: form, hint, current result or error, and previous guesses."""
    hint_field = '<input type="hidden" name="hint" value="" />' if show_hint else ""
    entries = "\n".join(_history_entry(r) for r in history)
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>{PAGE_TITLE}</title>
    <style>{_STYLE}    </style>
  </head>
  <body>
    <h1>{PAGE_TITLE}</h1>
    <form method="GET">
      <label for="text">Enter your guess:</label>
      <input type="text" id="text" name="text" value="{escape(guess, quote=True)}" />
      {hint_field}
      <button type="submit">Submit</button>
    </form>
    {_hint_block(show_hint, category)}
    <h2>Guess: {escape(guess) or "N/A"}</h2>
    {_result_block(guess, score, error)}
    <h2>Previous Guesses</h2>
    <div id="history">
{entries}
    </div>
  </body>
</html>
"""
