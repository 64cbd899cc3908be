"""Keyword cluster storage."""

from typing import Dict, List, Optional, Sequence

from psycopg import Connection

from ..models import KeywordCluster


class ClusterStore:
    """Manage keyword clusters in database."""

    def list_clusters(
        self,
        conn: Connection,
        themes: Optional[Sequence[str]] = None,
    ) -> List[KeywordCluster]:
        """Get clusters ordered by primary theme, optionally filtered by theme."""
        with conn.cursor() as cur:
            query = "SELECT * FROM keyword_clusters"
            params: tuple = ()

            if themes:
                query += " WHERE primary_theme = ANY(%s)"
                params = (list(themes),)

            query += " ORDER BY primary_theme, sub_theme"

            cur.execute(query, params)
            return [KeywordCluster(**row) for row in cur.fetchall()]

    def upsert_cluster(self, conn: Connection, cluster: KeywordCluster) -> str:
        """
        Insert or update a cluster keyed by (primary_theme, sub_theme).

        Returns:
            Cluster ID
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO keyword_clusters (
                    primary_theme, sub_theme, description, keywords, priority_weight
                ) VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (primary_theme, sub_theme) DO UPDATE SET
                    description = EXCLUDED.description,
                    keywords = EXCLUDED.keywords,
                    priority_weight = EXCLUDED.priority_weight
                RETURNING id
                """,
                (
                    cluster.primary_theme,
                    cluster.sub_theme,
                    cluster.description,
                    cluster.keywords,
                    cluster.priority_weight,
                ),
            )
            cluster_id = str(cur.fetchone()["id"])

        conn.commit()
        return cluster_id

    def update_weight(self, conn: Connection, cluster_id: str, weight: int) -> bool:
        """Set a cluster's priority weight. Returns False if no row matched."""
        if not 0 <= weight <= 100:
            raise ValueError(f"Priority weight must be between 0 and 100, got {weight}")

        with conn.cursor() as cur:
            cur.execute(
                "UPDATE keyword_clusters SET priority_weight = %s WHERE id = %s",
                (weight, cluster_id),
            )
            updated = cur.rowcount > 0

        conn.commit()
        return updated

    def delete_cluster(self, conn: Connection, cluster_id: str) -> bool:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM keyword_clusters WHERE id = %s", (cluster_id,))
            deleted = cur.rowcount > 0

        conn.commit()
        return deleted

    def sync_clusters(
        self,
        conn: Connection,
        clusters: Sequence[KeywordCluster],
    ) -> Dict[str, str]:
        """
        Sync clusters from taxonomy file to database.

        Returns:
            Mapping of "primary_theme/sub_theme" to database ID
        """
        return {
            f"{c.primary_theme}/{c.sub_theme}": self.upsert_cluster(conn, c)
            for c in clusters
        }
