"""Minimal server-rendered estimator page."""

from html import escape

from calculator.types import EstimatorStateDict


def _form(action: str, fields: str, button: str) -> str:
    return (
        f'<form method="post" action="{action}">'
        f"{fields}<button type=\"submit\">{escape(button)}</button></form>"
    )


def render_page(state: EstimatorStateDict) -> str:
    """
    Render estimator state as an HTML page.

    Only the selected input form is rendered; boost and breakdown
    controls appear once an estimate exists.
    """
    parts = [
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">",
        "<title>ENKI Staking Rewards Calculator</title></head><body>",
        "<h1>ENKI Staking Rewards Calculator</h1>",
        "<p>Estimate your ENKI airdrop rewards based on your staking points</p>",
        "<p><strong>Caution:</strong> This is a community-created tool and not an "
        "official ENKI product. All numbers are estimated values and may not reflect "
        "actual rewards.</p>",
    ]

    for method, label in (("address", "Enter Address"), ("manual", "Enter Points Manually")):
        parts.append(_form(
            "/api/input-method",
            f'<input type="hidden" name="method" value="{method}">',
            label,
        ))

    if state["input_method"] == "address":
        loading = state["lookup_state"] == "loading"
        parts.append(_form(
            "/api/points/address",
            '<label for="address">Your MetisL2 Wallet Address</label>'
            '<input type="text" id="address" name="address" required>',
            "Fetching..." if loading else "Fetch Staking Points",
        ))
    else:
        parts.append(_form(
            "/api/points/manual",
            '<label for="points">Your Staking Points</label>'
            '<input type="text" id="points" name="points" required>',
            "Calculate Reward",
        ))

    if state["error"]:
        parts.append(f'<p class="error">{escape(state["error"])}</p>')

    if state["staking_points"] is not None:
        parts.append(f"<p>Your Staking Points: {escape(state['staking_points'])}</p>")

    parts.append(f"<p>Total Staking Points: {escape(state['total_staking_points'])}</p>")
    parts.append(f"<p>Total ENKI Airdrop: {escape(state['total_airdrop'])}</p>")
    if state["price"] is not None:
        parts.append(f"<p>Current ENKI Price: {escape(state['price'])}</p>")

    estimate = state["estimate"]
    if estimate is not None:
        parts.append(f"<p>Estimated Reward: {escape(estimate['reward'])}</p>")
        if estimate["usd_value"] is not None:
            parts.append(f"<p>Estimated Value: {escape(estimate['usd_value'])}</p>")
            parts.append(f"<p>Estimated Value at ATH: {escape(estimate['ath_value'] or '')}</p>")
        for multiplier in state["boost_options"]:
            parts.append(_form(
                "/api/boost",
                f'<input type="hidden" name="multiplier" value="{multiplier}">',
                f"{multiplier}x BOOST",
            ))
        parts.append(
            f'<a href="{escape(state["boost_info_url"])}" target="_blank" '
            'rel="noopener noreferrer">How to boost?</a>'
        )

    parts.append(_form(
        "/api/breakdown/toggle",
        "",
        "Hide Calculations" if state["show_breakdown"] else "Show Calculations",
    ))
    if state["breakdown"]:
        parts.append("<h3>Calculation Breakdown</h3>")
        parts.extend(f"<p>{escape(line)}</p>" for line in state["breakdown"])

    parts.append(
        "<p><strong>Note:</strong> Make sure to use your MetisL2 wallet address when "
        "entering an address. This calculator only works for ENKI staked on the "
        "Metis network.</p>"
    )
    parts.append("</body></html>")
    return "".join(parts)
