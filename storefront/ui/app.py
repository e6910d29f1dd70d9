# storefront/ui/app.py

"""Terminal UI for browsing shops and their product catalogs."""

import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.color import Color, ColorParseError
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    LoadingIndicator,
    Select,
    Static,
)

from storefront.config.logging_config import (
    NotifyHandler,
    attach_notify_handler,
    detach_notify_handler,
)
from storefront.config.settings import Settings
from storefront.models.shop import Shop
from storefront.services.catalog import ShopCatalog
from storefront.services.shop_detail import (
    ERROR,
    LOADING,
    READY,
    ShopDetailController,
    ShopDetailState,
)

logger = logging.getLogger("storefront.ui")


class ShopDirectoryScreen(Screen[None]):
    """Lists every shop in the directory."""

    BINDINGS = [
        Binding("r", "reload", "Reload"),
    ]

    def __init__(self, catalog: ShopCatalog) -> None:
        super().__init__()
        self.catalog = catalog
        self.shops: list[Shop] = []

    def compose(self) -> ComposeResult:
        """Build the widget tree for the directory."""
        yield Header()
        yield Container(
            Static("🏬 Shops", id="title"),
            Static("Loading shops...", id="status"),
            LoadingIndicator(id="loader"),
            cast(
                DataTable[str],
                DataTable(
                    id="shops_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the table and start the first load."""
        table = cast(
            DataTable[str],
            self.query_one("#shops_table", DataTable),
        )
        table.add_columns("Name", "Slug", "Email", "Phone")
        self.action_reload()

    def on_screen_resume(self) -> None:
        self.app.title = StorefrontApp.TITLE

    def action_reload(self) -> None:
        """Re-fetch the shop directory."""
        self.run_worker(
            self.refresh_shops(), exclusive=True, group="directory"
        )

    async def refresh_shops(self) -> None:
        """Fetch the directory and fill the table."""
        loader = self.query_one("#loader", LoadingIndicator)
        status = self.query_one("#status", Static)
        table = cast(
            DataTable[str],
            self.query_one("#shops_table", DataTable),
        )
        loader.display = True
        status.update("Loading shops...")
        try:
            self.shops = await self.catalog.list_shops()
        finally:
            loader.display = False

        table.clear()
        for shop in self.shops:
            table.add_row(
                shop.name,
                shop.slug,
                shop.contact_info,
                shop.phone_number or "—",
            )

        if self.shops:
            status.update(f"{len(self.shops)} shops")
        else:
            status.update("❌ No shops available")

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the selected shop."""
        if 0 <= event.cursor_row < len(self.shops):
            app = cast(StorefrontApp, self.app)
            app.open_shop(self.shops[event.cursor_row].slug)


class ShopDetailScreen(Screen[None]):
    """One shop's header, sortable product grid and cart counter."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("a", "add_to_cart", "Add to cart"),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(
        self, controller: ShopDetailController, slug: str
    ) -> None:
        super().__init__()
        self.controller = controller
        self.shop_slug = slug

    def compose(self) -> ComposeResult:
        """Build the widget tree for the shop page."""
        sort_options = [
            (mode["label"], mode["id"])
            for mode in Settings.SORT_MODES
        ]

        yield Header()
        yield Container(
            Static("", id="shop_name"),
            Static("", id="shop_contact"),
            id="shop_header",
        )
        yield Container(
            Horizontal(
                Static("Our Products", id="products_title"),
                Select(
                    sort_options,
                    value=Settings.DEFAULT_SORT,
                    allow_blank=False,
                    id="sort_select",
                ),
                id="toolbar",
            ),
            LoadingIndicator(id="loader"),
            Static("", id="error_message"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            Horizontal(
                Input(
                    value="1",
                    placeholder="Qty",
                    type="integer",
                    id="quantity_input",
                ),
                Button(
                    "Add to cart", variant="primary", id="add_btn"
                ),
                id="cart_bar",
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Configure the grid and start loading the shop."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.add_columns("Name", "Price", "Category", "Stock")
        self._update_cart_label()
        self.action_reload()

    def action_reload(self) -> None:
        """Restart the load sequence for this slug."""
        self.run_worker(
            self.load_shop(), exclusive=True, group="detail"
        )

    def action_back(self) -> None:
        """Return to the shop directory."""
        self.app.pop_screen()

    async def load_shop(self) -> None:
        """Run the controller's load and render the outcome."""
        self.render_state(
            ShopDetailState(status=LOADING, slug=self.shop_slug)
        )
        state = await self.controller.load(self.shop_slug)
        if state.slug != self.shop_slug:
            return
        self.render_state(state)

    def render_state(self, state: ShopDetailState) -> None:
        """Show exactly one of loading, error or ready."""
        loader = self.query_one("#loader", LoadingIndicator)
        error = self.query_one("#error_message", Static)
        header = self.query_one("#shop_header", Container)
        toolbar = self.query_one("#toolbar", Horizontal)
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        cart_bar = self.query_one("#cart_bar", Horizontal)

        ready = state.status == READY
        loader.display = state.status == LOADING
        error.display = state.status == ERROR
        for widget in (header, toolbar, table, cart_bar):
            widget.display = ready

        if state.status == ERROR:
            error.update(f"Oops!\n{state.error}")
            return
        if ready and state.shop is not None:
            self._render_header(state.shop)
            select = self.query_one("#sort_select", Select)
            with select.prevent(Select.Changed):
                select.value = state.sort_mode
            self.populate_table(state)

    def _render_header(self, shop: Shop) -> None:
        self.app.title = shop.name
        self.query_one("#shop_name", Static).update(
            Text(shop.name, style="bold")
        )
        contact = f"Email: {shop.contact_info}"
        if shop.phone_number:
            contact += f"\nContact: {shop.phone_number}"
        self.query_one("#shop_contact", Static).update(contact)

        if shop.theme_color:
            try:
                color = Color.parse(shop.theme_color)
            except ColorParseError:
                logger.debug(
                    "Ignoring invalid theme color %r for %s",
                    shop.theme_color,
                    shop.slug,
                )
            else:
                header = self.query_one("#shop_header", Container)
                header.styles.border_left = ("thick", color)

    def populate_table(self, state: ShopDetailState) -> None:
        """Fill the grid with the currently sorted products."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.clear()
        if not state.products:
            return

        min_price = min(p.price_value for p in state.products)

        for p in state.products:
            is_cheapest = p.price_value == min_price
            table.add_row(
                p.name[:60],
                Text(
                    f"{p.price_value:,.2f}",
                    style="bold green" if is_cheapest else "",
                ),
                p.category,
                p.stock or "—",
            )

    def on_select_changed(self, event: Select.Changed) -> None:
        """Re-sort the held products when the dropdown changes."""
        if event.select.id != "sort_select":
            return
        if not isinstance(event.value, str):
            return
        if event.value == self.controller.state.sort_mode:
            return
        state = self.controller.change_sort(event.value)
        if state.status == READY and state.slug == self.shop_slug:
            self.populate_table(state)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button click events."""
        if event.button.id == "add_btn":
            self.action_add_to_cart()

    def action_add_to_cart(self) -> None:
        """Add the highlighted product to the in-memory cart."""
        state = self.controller.state
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        row = table.cursor_row
        if state.status != READY or not 0 <= row < len(state.products):
            self.notify("Select a product first", severity="warning")
            return

        quantity_input = self.query_one("#quantity_input", Input)
        try:
            quantity = int(quantity_input.value or "1")
        except ValueError:
            quantity = 1
        if quantity < 1:
            self.notify("Quantity must be at least 1", severity="warning")
            return

        product = state.products[row]
        self.controller.add_to_cart(product, quantity)
        self._update_cart_label()
        self.notify(f"Added {quantity} × {product.name}")

    def _update_cart_label(self) -> None:
        self.app.sub_title = f"🛒 Cart: {self.controller.cart_count}"


class StorefrontApp(App[object]):
    """Terminal storefront: shop directory plus per-shop catalogs."""

    CSS_PATH = "styles.tcss"
    TITLE = "Storefront"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: ShopCatalog | None = None,
        slug: str | None = None,
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.catalog = catalog or ShopCatalog.with_sample_data(
            self.settings.SHOP_DIRECTORY_URL
        )
        self.controller = ShopDetailController(self.catalog)
        self.initial_slug = slug
        self._notify_handler: NotifyHandler | None = None

    def on_mount(self) -> None:
        """Show the directory, then jump to a shop if one was given."""
        self._notify_handler = attach_notify_handler(self.notify)
        self.push_screen(ShopDirectoryScreen(self.catalog))
        if self.initial_slug:
            self.open_shop(self.initial_slug)

    def on_unmount(self) -> None:
        if self._notify_handler is not None:
            detach_notify_handler(self._notify_handler)
            self._notify_handler = None

    def open_shop(self, slug: str) -> None:
        """Push the detail screen for *slug*."""
        logger.info("Opening shop '%s'", slug)
        self.push_screen(ShopDetailScreen(self.controller, slug))
