"""Sheet fetching, normalization, entity building and the in-memory repository."""
from .fetcher import SheetFetcher
from .loader import build_clients, build_accounts, build_agencies
from .query import search_clients, paginate
from .schemas import Client, Account, Agency, AccountType, MaritalStatus, SearchResult, Sheet
from .store import Repository
