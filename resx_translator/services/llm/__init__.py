"""Model-invocation transports.

Import concrete providers explicitly:
    from resx_translator.services.llm.bedrock import BedrockProvider
"""
