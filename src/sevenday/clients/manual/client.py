"""Interactive block form via questionary."""

from datetime import date

import click
import questionary
from questionary import Style

from ...models.block import MAX_BLOCK_WEEKS, MIN_BLOCK_WEEKS, Block, BlockType
from ...models.weight_entry import is_plain_number
from ...utils.dates import start_of_week

# Custom style for the form
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)

DEFAULT_WEEKS = 12
DEFAULT_RATE = 0.5


def _is_number(text: str) -> bool | str:
    if not is_plain_number(text.strip()):
        return "Enter a number"
    return True


def _is_weeks(text: str) -> bool | str:
    if text.isdigit() and MIN_BLOCK_WEEKS <= int(text) <= MAX_BLOCK_WEEKS:
        return True
    return f"Enter a whole number from {MIN_BLOCK_WEEKS} to {MAX_BLOCK_WEEKS}"


def _is_date(text: str) -> bool | str:
    try:
        date.fromisoformat(text)
    except ValueError:
        return "Use YYYY-MM-DD"
    return True


class ManualInputClient:
    """Interactive questionnaire for creating or editing a block."""

    async def _ask(self, question):
        """Ask a question; Ctrl-C aborts the whole form."""
        answer = await question.ask_async()
        if answer is None:
            raise click.Abort()
        return answer

    async def collect_block(
        self,
        default_start_weight: float | None = None,
        existing: Block | None = None,
        defaults: dict | None = None,
    ) -> dict:
        """Ask for block fields.

        Args:
            default_start_weight: Prefill for the start weight, usually this
                week's average
            existing: Block being edited; its values become the defaults
            defaults: Values already given on the command line; these win
                over both of the above

        Returns:
            Dict with type, start_date, weeks, start_weight and rate

        Raises:
            click.Abort: If the user cancels a prompt
        """
        if existing:
            initial = {
                "type": existing.type,
                "start_date": existing.start_date,
                "weeks": existing.weeks,
                "start_weight": existing.start_weight,
                "rate": existing.rate,
            }
        else:
            initial = {
                "type": None,
                "start_date": start_of_week(date.today()),
                "weeks": DEFAULT_WEEKS,
                "start_weight": default_start_weight,
                "rate": DEFAULT_RATE,
            }
        initial.update({k: v for k, v in (defaults or {}).items() if v is not None})

        print("\n=== Goal Block ===\n")

        block_type = await self._ask(questionary.select(
            "Block type:",
            choices=[
                questionary.Choice("Cut (lose weight)", BlockType.CUT),
                questionary.Choice("Bulk (gain weight)", BlockType.BULK),
                questionary.Choice("Maintain", BlockType.MAINTAIN),
            ],
            default=initial["type"],
            style=custom_style,
        ))

        start_text = await self._ask(questionary.text(
            "Start date (snaps to Monday):",
            default=initial["start_date"].isoformat(),
            validate=_is_date,
            style=custom_style,
        ))

        weeks_text = await self._ask(questionary.text(
            "Length in weeks:",
            default=str(initial["weeks"]),
            validate=_is_weeks,
            style=custom_style,
        ))

        weight_default = initial["start_weight"]
        weight_text = await self._ask(questionary.text(
            "Start weight:",
            default=f"{weight_default:.1f}" if weight_default else "",
            validate=_is_number,
            style=custom_style,
        ))

        rate = 0.0
        if block_type != BlockType.MAINTAIN:
            rate_default = initial["rate"] or DEFAULT_RATE
            rate_text = await self._ask(questionary.text(
                "Rate (% of start weight per week):",
                default=f"{rate_default:g}",
                validate=_is_number,
                style=custom_style,
            ))
            rate = float(rate_text)

        return {
            "type": block_type,
            "start_date": date.fromisoformat(start_text),
            "weeks": int(weeks_text),
            "start_weight": float(weight_text),
            "rate": rate,
        }
