"""Supabase-backed session store."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from image_gallery.domain.sessions import SessionRecord
from image_gallery.services.sessions import SessionStore


@dataclass
class SupabaseSessionStore(SessionStore):
    """Persists login sessions in the sessions table."""

    client: Client

    def save(self, session: SessionRecord) -> None:
        """Insert a session row."""
        self.client.table("sessions").insert(
            {
                "token": session.token,
                "user_id": str(session.user_id),
                "expires_at": session.expires_at.isoformat(),
            }
        ).execute()

    def get(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""
        response = (
            self.client.table("sessions")
            .select("token, user_id, expires_at")
            .eq("token", token)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return SessionRecord(
            token=row["token"],
            user_id=UUID(row["user_id"]),
            expires_at=datetime.fromisoformat(row["expires_at"]),
        )

    def delete(self, token: str) -> None:
        """Delete a session row."""
        self.client.table("sessions").delete().eq("token", token).execute()

    def purge_expired(self, now: datetime) -> int:
        """Delete every session row that expired at or before now."""
        response = (
            self.client.table("sessions")
            .delete()
            .lte("expires_at", now.isoformat())
            .execute()
        )
        return len(response.data or [])
