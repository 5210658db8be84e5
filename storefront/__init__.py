"""
Storefront package.

- catalog: read-only product list
- sessions: server-side session store and cookie middleware
- cart: session-scoped cart state
- payments: Stripe Checkout adapter
- routers: HTTP endpoints
"""

__version__ = "1.0.0"
