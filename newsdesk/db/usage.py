"""LLM usage log queries."""

from datetime import datetime
from typing import List, Optional

from psycopg import Connection

from ..models import LlmUsageLog


class UsageLogStore:
    """Read LLM usage logs from database."""

    def get_logs_since(
        self,
        conn: Connection,
        since: datetime,
        limit: Optional[int] = None,
    ) -> List[LlmUsageLog]:
        """Get logs created at or after a timestamp, newest first."""
        with conn.cursor() as cur:
            query = """
                SELECT * FROM llm_usage_logs
                WHERE created_at >= %s
                ORDER BY created_at DESC
            """
            params: tuple = (since,)

            if limit is not None:
                query += " LIMIT %s"
                params += (limit,)

            cur.execute(query, params)
            return [
                LlmUsageLog(**{**row, "estimated_cost": float(row["estimated_cost"] or 0)})
                for row in cur.fetchall()
            ]
