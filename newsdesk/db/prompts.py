"""LLM prompt storage."""

from typing import List, Optional, Union

from psycopg import Connection

from ..generation import SearchSettings, embed_metadata, filter_news_search_prompts
from ..models import LlmPrompt

PROMPT_COLUMNS = (
    "function_name",
    "model",
    "prompt_text",
    "include_clusters",
    "include_tracking_summary",
    "include_sources_map",
    "is_active",
    "last_updated_by",
)


class PromptStore:
    """Manage LLM prompts in database."""

    def list_prompts(self, conn: Connection, news_search_only: bool = False) -> List[LlmPrompt]:
        """Get prompts ordered by function name."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM llm_prompts ORDER BY function_name")
            prompts = [LlmPrompt(**row) for row in cur.fetchall()]

        if news_search_only:
            return filter_news_search_prompts(prompts)
        return prompts

    def get_prompt(self, conn: Connection, prompt_id: str) -> Optional[LlmPrompt]:
        """Get prompt by ID."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM llm_prompts WHERE id = %s", (prompt_id,))
            row = cur.fetchone()
        return LlmPrompt(**row) if row else None

    def save_prompt(
        self,
        conn: Connection,
        prompt: LlmPrompt,
        settings: Optional[Union[SearchSettings, dict]] = None,
    ) -> str:
        """
        Insert or update a prompt, embedding search settings when given.

        Returns:
            Prompt ID
        """
        if settings is not None:
            prompt = prompt.model_copy(
                update={"prompt_text": embed_metadata(prompt.prompt_text, settings)}
            )

        values = tuple(getattr(prompt, column) for column in PROMPT_COLUMNS)

        with conn.cursor() as cur:
            if prompt.id:
                assignments = ", ".join(f"{column} = %s" for column in PROMPT_COLUMNS)
                cur.execute(
                    f"UPDATE llm_prompts SET {assignments} WHERE id = %s RETURNING id",
                    values + (prompt.id,),
                )
            else:
                placeholders = ", ".join(["%s"] * len(PROMPT_COLUMNS))
                cur.execute(
                    f"INSERT INTO llm_prompts ({', '.join(PROMPT_COLUMNS)}) "
                    f"VALUES ({placeholders}) RETURNING id",
                    values,
                )
            row = cur.fetchone()

        if row is None:
            raise LookupError(f"Prompt not found: {prompt.id}")

        conn.commit()
        return str(row["id"])

    def set_active(self, conn: Connection, prompt_id: str, is_active: bool) -> bool:
        """Toggle a prompt's active flag. Returns False if no row matched."""
        with conn.cursor() as cur:
            cur.execute(
                "UPDATE llm_prompts SET is_active = %s WHERE id = %s",
                (is_active, prompt_id),
            )
            updated = cur.rowcount > 0

        conn.commit()
        return updated

    def delete_prompt(self, conn: Connection, prompt_id: str) -> bool:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM llm_prompts WHERE id = %s", (prompt_id,))
            deleted = cur.rowcount > 0

        conn.commit()
        return deleted
