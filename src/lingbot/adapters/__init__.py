from .openai_adapter import get_chat_completions, create_client, build_payload

__all__ = ['get_chat_completions', 'create_client', 'build_payload']
