"""
AI Service - Sales analysis over the consolidated spreadsheet data
"""

import logging
from typing import Dict, List, Optional

from openai import APIStatusError, OpenAI

from sales_bot.core.errors import CompletionError
from sales_bot.models.sales import ConsolidatedTable

logger = logging.getLogger(__name__)

TEMPERATURE = 0.2

SYSTEM_PROMPT = """Você é o 'Alpha Insights Sales Bot', um analista de dados de vendas sênior.
Analise o CSV fornecido e responda à pergunta do usuário.

Contexto: Alpha Insights é uma varejista de tecnologia.

Estrutura do CSV:
- data: Data da transação
- id_transacao: ID único
- produto: Nome do produto
- categoria: Categoria
- regiao: Região de venda
- quantidade: Unidades vendidas
- preco_unitario: Preço por unidade
- receita_total: Receita total
- mes_origem: Mês de origem

Instruções:
1. Base sua análise EXCLUSIVAMENTE nos dados do CSV
2. Realize cálculos necessários (somas, médias, percentuais)
3. Seja claro e objetivo em português brasileiro
4. Apresente valores em R$ quando apropriado
5. Use emojis para melhor visualização (📊 📈 💰 🏆)"""


class AIService:
    """Service for answering sales questions with a chat-completion model"""

    def __init__(self, api_key: str, base_url: str, model: str, client: Optional[OpenAI] = None):
        """Initialize against an OpenAI-compatible gateway"""
        self._owns_client = client is None
        # Retries disabled: one exchange per request
        self.client = client or OpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self.model = model

    def close(self):
        """Release the HTTP client if this service created it"""
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @staticmethod
    def build_user_message(query: str, table: ConsolidatedTable) -> str:
        return f"Pergunta: {query}\n\n--- DADOS ---\n{table.to_csv()}"

    def build_messages(self, query: str, table: ConsolidatedTable) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": self.build_user_message(query, table)},
        ]

    def answer_question(self, query: str, table: ConsolidatedTable) -> str:
        """
        Ask the model about the sales table

        Args:
            query: The user's question, passed through verbatim
            table: Consolidated rows; sent in full, never truncated

        Returns:
            Content of the first completion choice

        Raises:
            CompletionError: on a non-success status or a missing answer
        """
        logger.info("Sending %s rows to %s", len(table), self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(query, table),
                temperature=TEMPERATURE,
            )
        except APIStatusError as e:
            logger.error("AI API error: %s", e.response.text)
            raise CompletionError(f"AI API error: {e.status_code}") from e

        if not response.choices:
            raise CompletionError("AI API returned no choices")

        answer = response.choices[0].message.content
        if answer is None:
            raise CompletionError("AI API returned an empty answer")

        logger.info("Analysis complete: %s characters", len(answer))
        return answer
