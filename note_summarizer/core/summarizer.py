"""
Module for summarizing documents using LLM models.
"""

from typing import Any, Callable, Dict, List, Optional

from langchain.chat_models import init_chat_model
from langchain_core.documents import Document
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from note_summarizer.config import config
from note_summarizer.core.prompts import combine_template, summary_template
from note_summarizer.models.schemas import ChainType, SummaryConfig
from note_summarizer.utils.logger import logging


def get_llm(api_key: str, config: Optional[SummaryConfig] = None) -> BaseChatModel:
    """
    Build the chat model used for summarization.

    Args:
        api_key: OpenAI API key
        config: Model name and sampling temperature

    Returns:
        A LangChain chat model
    """
    config = config or SummaryConfig()
    return init_chat_model(
        model=config.model,
        model_provider="openai",
        temperature=config.temperature,
        api_key=api_key,
    )


class SummarizationChain:
    """Summarize a list of documents with a "stuff" or "map_reduce" strategy.

    ``stuff`` puts every document into a single prompt. ``map_reduce``
    summarizes each document on its own, then combines the partial
    summaries with one more call. While the joined partial summaries are
    longer than ``max_length`` they are first combined in groups.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        chain_type: ChainType = ChainType.STUFF,
        max_length: int = config.COLLAPSE_MAX_LENGTH,
        length_function: Callable[[str], int] = len,
    ):
        self.chain_type = ChainType(chain_type)
        self.max_length = max_length
        self.length_function = length_function

        summary_prompt = ChatPromptTemplate.from_messages([("human", summary_template)])
        combine_prompt = ChatPromptTemplate.from_messages([("human", combine_template)])

        self.summary_chain = summary_prompt | llm | StrOutputParser()
        self.combine_chain = combine_prompt | llm | StrOutputParser()

    @staticmethod
    def _documents(inputs: Dict[str, Any]) -> List[Document]:
        docs = inputs.get("input_documents")
        if not docs:
            raise ValueError("No documents to summarize")
        return list(docs)

    @staticmethod
    def _join(texts: List[str]) -> str:
        return "\n\n".join(texts)

    def _too_long(self, texts: List[str]) -> bool:
        return self.length_function(self._join(texts)) > self.max_length

    def _groups(self, texts: List[str]) -> List[List[str]]:
        """Split texts into runs whose joined length fits ``max_length``."""
        groups: List[List[str]] = []
        current: List[str] = []
        for text in texts:
            if current and self._too_long(current + [text]):
                groups.append(current)
                current = []
            current.append(text)
        if current:
            groups.append(current)
        return groups

    def _collapse_inputs(self, texts: List[str]) -> Optional[List[Dict[str, str]]]:
        """Combine prompts for the next collapse round, or None when done."""
        if len(texts) < 2 or not self._too_long(texts):
            return None

        groups = self._groups(texts)
        if len(groups) == len(texts):
            logging.warning(
                f"Partial summaries exceed {self.max_length} characters on their own, "
                "combining them as they are"
            )
            return None

        logging.debug(f"Collapsing {len(texts)} summaries into {len(groups)}")
        return [{"text": self._join(group)} for group in groups]

    def collapse(self, texts: List[str]) -> List[str]:
        inputs = self._collapse_inputs(texts)
        while inputs is not None:
            texts = self.combine_chain.batch(inputs)
            inputs = self._collapse_inputs(texts)
        return texts

    async def acollapse(self, texts: List[str]) -> List[str]:
        inputs = self._collapse_inputs(texts)
        while inputs is not None:
            texts = await self.combine_chain.abatch(inputs)
            inputs = self._collapse_inputs(texts)
        return texts

    def invoke(self, inputs: Dict[str, Any]) -> Dict[str, str]:
        docs = self._documents(inputs)
        logging.info(f"Summarizing {len(docs)} document(s) with {self.chain_type.value}")

        if self.chain_type == ChainType.STUFF:
            text = self.summary_chain.invoke({"text": self._join([d.page_content for d in docs])})
            return {"text": text}

        partial = self.collapse(self.summary_chain.batch([{"text": d.page_content} for d in docs]))
        text = self.combine_chain.invoke({"text": self._join(partial)})
        return {"text": text}

    async def ainvoke(self, inputs: Dict[str, Any]) -> Dict[str, str]:
        docs = self._documents(inputs)
        logging.info(f"Summarizing {len(docs)} document(s) with {self.chain_type.value}")

        if self.chain_type == ChainType.STUFF:
            text = await self.summary_chain.ainvoke({"text": self._join([d.page_content for d in docs])})
            return {"text": text}

        # Map
        partial = await self.summary_chain.abatch([{"text": d.page_content} for d in docs])
        logging.debug(f"Got {len(partial)} partial summaries")
        partial = await self.acollapse(partial)

        # Reduce
        text = await self.combine_chain.ainvoke({"text": self._join(partial)})
        return {"text": text}


def load_summarization_chain(llm: BaseChatModel, chain_type: str = "stuff") -> SummarizationChain:
    """
    Build a summarization chain.

    Args:
        llm: Chat model to call
        chain_type: "stuff" or "map_reduce"

    Returns:
        SummarizationChain taking ``{"input_documents": [...]}`` and
        returning ``{"text": summary}``
    """
    try:
        kind = ChainType(chain_type)
    except ValueError:
        raise ValueError(f"Unknown summarization chain type: {chain_type}")
    return SummarizationChain(llm, kind)
