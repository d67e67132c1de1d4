#!/usr/bin/env python3
"""
Consulta CLI — search clients, inspect accounts and agencies, run the API server.

USAGE:
  python -m consulta.cli clients                            # First page of all clients
  python -m consulta.cli clients "silva" --page 2           # Search by name / social name
  python -m consulta.cli clients 12345678900 --agency 12    # CPF without punctuation, agency 12
  python -m consulta.cli clients --marital-status married

  python -m consulta.cli client 123.456.789-00              # Detail: accounts + agency

  python -m consulta.cli agencies                           # List agencies

  python -m consulta.cli serve                              # Start API server
  python -m consulta.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
import sys

from consulta.config import DEFAULT_PAGE_SIZE, configure_logging
from consulta.data.schemas import MaritalStatus
from consulta.data.store import Repository
from consulta.errors import FetchError
from consulta.formatters import format_brl, format_date, format_tax_id


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  CONSULTA — {title}")
    print("=" * 70)


def cmd_clients(args) -> int:
    """Search and paginate clients."""
    _banner("CLIENTS")
    repository = Repository()
    try:
        repository.load_clients()
    except FetchError as e:
        print(f"\n  ERROR: {e}\n  Check the connection and try again.")
        return 1

    status = MaritalStatus(args.marital_status.capitalize()) if args.marital_status else None
    result = repository.search(
        " ".join(args.term), page=args.page, page_size=args.page_size,
        agency_code=args.agency, marital_status=status, email=args.email,
    )

    if not repository.list_clients():
        print("\n  No clients in the spreadsheet.")
        return 0

    print(f"\n  {result.total} found — page {result.page} of {result.total_pages}\n")
    for c in result.items:
        label = f"{c.name} ({c.social_name})" if c.social_name else c.name
        print(f"  {label[:40]:<42}{format_tax_id(c.tax_id):<20}Ag. {c.agency_code:<6}{c.marital_status.value}")
    if not result.items:
        print("  (empty page)")
    return 0


def cmd_client(args) -> int:
    """Show every client with a tax id, their accounts and agency."""
    _banner("CLIENT DETAIL")
    repository = Repository()
    summary = repository.load_all()
    if "clients" in summary.errors:
        print(f"\n  ERROR: {summary.errors['clients']}")
        return 1
    for sheet, message in summary.errors.items():
        print(f"  WARNING: {sheet} unavailable: {message}")

    matches = [c for c in repository.list_clients() if c.tax_id == args.tax_id]
    if not matches:
        print(f"\n  No client with CPF/CNPJ {args.tax_id}")
        return 1

    for c in matches:
        print(f"\n  {c.name}")
        if c.social_name:
            print(f"  Social name:    {c.social_name}")
        print(f"  CPF/CNPJ:       {format_tax_id(c.tax_id)}")
        if c.national_id:
            print(f"  RG:             {c.national_id}")
        print(f"  Email:          {c.email or '-'}")
        print(f"  Address:        {c.address or '-'}")
        print(f"  Birth date:     {format_date(c.birth_date)}")
        print(f"  Marital status: {c.marital_status.value}")
        print(f"  Annual income:  {format_brl(c.annual_income)}")
        print(f"  Net worth:      {format_brl(c.net_worth)}")

        agency = repository.agency_by_code(c.agency_code)
        if agency:
            print(f"\n  Agency {agency.code} — {agency.name}, {agency.address or 'address not informed'}")
        else:
            print(f"\n  Agency {c.agency_code} — not found")

        accounts = repository.accounts_for_client(c.tax_id)
        print(f"\n  ACCOUNTS ({len(accounts)}):")
        for a in accounts:
            print(f"    {a.type.value:<10}balance {format_brl(a.balance):>16}   "
                  f"limit {format_brl(a.credit_limit):>14}   available {format_brl(a.available_credit):>14}   "
                  f"total {format_brl(a.total_limit):>16}")
    return 0


def cmd_agencies(args) -> int:
    """List agencies."""
    _banner("AGENCIES")
    repository = Repository()
    try:
        agencies = repository.load_agencies()
    except FetchError as e:
        print(f"\n  ERROR: {e}")
        return 1
    print(f"\n  AGENCIES ({len(agencies)}):\n")
    for a in agencies:
        print(f"  {a.code:<8}{a.name[:40]:<42}{a.address}")
    return 0


def cmd_serve(args) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Consulta API on port {args.port}...")
    uvicorn.run("consulta.main:app", host="0.0.0.0", port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Consulta — bank clients, accounts and agencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    clients_parser = subparsers.add_parser("clients", help="Search clients")
    clients_parser.add_argument("term", nargs="*", help="Name, social name or CPF/CNPJ")
    clients_parser.add_argument("--page", type=int, default=1, help="Page (1-based)")
    clients_parser.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE, help="Clients per page")
    clients_parser.add_argument("--agency", type=int, help="Agency code")
    clients_parser.add_argument("--marital-status", choices=[s.value.lower() for s in MaritalStatus],
                                help="Marital status")
    clients_parser.add_argument("--email", help="Email contains")
    clients_parser.set_defaults(func=cmd_clients)

    client_parser = subparsers.add_parser("client", help="Client detail by CPF/CNPJ")
    client_parser.add_argument("tax_id", help="CPF/CNPJ exactly as in the spreadsheet")
    client_parser.set_defaults(func=cmd_client)

    agencies_parser = subparsers.add_parser("agencies", help="List agencies")
    agencies_parser.set_defaults(func=cmd_agencies)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    configure_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
