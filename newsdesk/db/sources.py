"""Source management in database."""

from typing import Dict, List, Sequence

from psycopg import Connection

from ..models import Source


class SourceStore:
    """Manage news sources in database."""

    def list_sources(self, conn: Connection) -> List[Source]:
        """Get all sources, highest priority tier first."""
        with conn.cursor() as cur:
            cur.execute(
                """
                SELECT * FROM news_sources
                ORDER BY priority_tier, source_name
                """
            )
            return [Source(**row) for row in cur.fetchall()]

    def sync_sources(
        self,
        conn: Connection,
        sources: Sequence[Source],
    ) -> Dict[str, str]:
        """
        Sync sources from taxonomy file to database.

        Returns:
            Mapping of source name to database ID
        """
        source_map = {}

        with conn.cursor() as cur:
            for source in sources:
                cur.execute(
                    """
                    INSERT INTO news_sources (source_name, source_url, priority_tier, source_type)
                    VALUES (%s, %s, %s, %s)
                    ON CONFLICT (source_name) DO UPDATE SET
                        source_url = EXCLUDED.source_url,
                        priority_tier = EXCLUDED.priority_tier,
                        source_type = EXCLUDED.source_type
                    RETURNING id
                    """,
                    (
                        source.source_name,
                        source.source_url,
                        source.priority_tier,
                        source.source_type,
                    ),
                )

                source_map[source.source_name] = str(cur.fetchone()["id"])

        conn.commit()
        return source_map

    def delete_source(self, conn: Connection, source_id: str) -> bool:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM news_sources WHERE id = %s", (source_id,))
            deleted = cur.rowcount > 0

        conn.commit()
        return deleted
