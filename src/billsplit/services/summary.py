from __future__ import annotations

from billsplit.models import BillOutput


def format_summary(output: BillOutput) -> str:
    header = f"{output.date} {output.location}".strip()
    lines = [
        header,
        f"Subtotal: {output.sub_total:.2f}",
        f"Tip: {output.tip:.2f}",
        f"Total: {output.total_amount:.2f}",
    ]
    lines.extend(build_person_lines(output))
    return "\n".join(lines)


def build_person_lines(output: BillOutput) -> list[str]:
    person_lines = ["\nPer person:"]
    if not output.items:
        person_lines.append("• no personal items, shared costs are unassigned")
        return person_lines

    for item in output.items:
        person_lines.append(f"• {item.name}: {item.amount:.2f}")
    return person_lines
