"""Supabase client for the car store."""

import logging
from functools import lru_cache

from supabase import Client, create_client

from ..config import settings
from ..exceptions import ServiceConfigurationError


@lru_cache()
def get_supabase_client() -> Client | None:
    """Return the shared Supabase client, built once from the VEHICLES_SUPABASE_* settings.

    ``None`` means no credentials were given and the in-memory car store should be
    used. Once credentials are given the car store has to be Supabase, so a client
    that cannot be built is a startup error, not a reason to fall back. No query is
    issued here; an unreachable project only shows up on the first read or write.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logging.info("No Supabase URL/key set for the car store")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as exc:
        raise ServiceConfigurationError(
            f"Supabase is configured for the car store but the client could not be created: {exc}"
        ) from exc


# Expected table layout:
#
# create table cars (
#     id bigint generated by default as identity primary key,
#     condition text not null,
#     details jsonb not null,
#     lat double precision not null,
#     lon double precision not null,
#     created_at timestamptz not null default now()
# );
