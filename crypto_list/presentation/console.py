"""Console rendering of the coin listing."""
import sys
from typing import Callable, Optional, TextIO

from crypto_list.models.listing import FailedState, LoadedState, LoadingState, ViewState
from crypto_list.presentation.alerts import CLEAR_FILTERS, Alert, alert_for_view_model
from crypto_list.services.listing_view_model import CryptoListingViewModel


def format_coin_table(coins) -> str:
    """Format coins as a fixed-width table."""
    lines = [f"{'NAME':<20} {'SYMBOL':<10} {'TYPE':<10} {'ACTIVE':<7} NEW"]
    for coin in coins:
        lines.append(
            f"{coin.name:<20} {coin.symbol:<10} {coin.kind.value:<10} "
            f"{'yes' if coin.is_active else 'no':<7} {'yes' if coin.is_new else 'no'}"
        )
    return "\n".join(lines)


class ConsoleListPresenter:
    """Renders every published state and handles alerts.

    Args:
        view_model: View model to observe and send actions to
        confirm: Asked with the alert title when an alert offers an action;
            returns True to perform it
        out: Stream to write to
    """

    def __init__(
        self,
        view_model: CryptoListingViewModel,
        confirm: Optional[Callable[[str], bool]] = None,
        out: TextIO = None
    ):
        self.view_model = view_model
        self.confirm = confirm or (lambda title: True)
        self.out = out or sys.stdout
        self.items = ()
        self._subscription = view_model.state_publisher.subscribe(self.render)

    def close(self):
        self._subscription.cancel()

    def render(self, state: ViewState):
        if isinstance(state, LoadingState):
            self._write("Loading coins...")
        elif isinstance(state, LoadedState):
            self.items = state.coins
            self._write(format_coin_table(state.coins))
            self._write(f"{len(state.coins)} coins")
        elif isinstance(state, FailedState):
            pass  # rendered as an alert
        else:
            raise TypeError(f"Unknown view state: {state!r}")

        alert = alert_for_view_model(self.view_model, state)
        if alert:
            self.show_alert(alert)

    def show_alert(self, alert: Alert):
        self._write(f"! {alert.title}")
        if alert.action == CLEAR_FILTERS and self.confirm(f"{alert.title}. Clear filters?"):
            self.view_model.clear_filters()

    def _write(self, text: str):
        print(text, file=self.out)
