"""Modules — a CRM shell whose feature modules register their own routes.

Demonstrates declarative construction, late registration after the
catch-all, index routes, parent-to-child ``redirect_to`` and sibling
redirect routes.

Run:
    python app.py
    routetree routes app:routes
"""

from routetree import MemoryHistory, RouteTree, mount


class Shell:
    pass


class Dashboard:
    pass


class NotFound:
    pass


class CustomerList:
    pass


class CustomerDetail:
    pass


class OrderList:
    pass


routes = RouteTree({"path": "/", "component": Shell})
routes.add_index_route(Dashboard)
routes.add_no_match_route(NotFound)


def register_customers(tree: RouteTree) -> None:
    tree.add_child_route(
        {
            "path": "/customer",
            "redirect_to": "list",
            "child_routes": [
                {"path": "list", "component": CustomerList},
                {"path": "detail", "component": CustomerDetail},
            ],
        }
    )


def register_orders(tree: RouteTree) -> None:
    tree.add_child_route({"path": "/orders", "component": OrderList})
    tree.add_redirect_route("/sales", "/orders")


register_customers(routes)
register_orders(routes)


def render(exported: dict, on_update) -> str:
    lines = []

    def visit(record: dict, depth: int) -> None:
        component = record.get("component")
        label = getattr(component, "__name__", "-")
        lines.append(f"{'  ' * depth}{record['path']}  {label}")
        for child in record.get("child_routes", ()):
            visit(child, depth + 1)

    visit(exported, 0)
    return "\n".join(lines)


if __name__ == "__main__":
    history = MemoryHistory("/customer")
    mounted = mount(routes, history, render)
    print(mounted.rendered)
    print(f"location: {history.location.pathname}")
