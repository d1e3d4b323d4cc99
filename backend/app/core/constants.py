"""
Centralized constants for chat and integrations.

Change provider catalogs or closed sets here instead of scattering literals across services and routes.
"""
# Providers accept only the models listed under them. Order matters: model resolution scans
# providers in this order and the first listed model is the provider's default.
OLLAMA_MODELS = ("llama3.2", "llama3.1", "mistral", "gemma3")
HUGGINGFACE_MODELS = (
    "deepseek-ai/DeepSeek-R1-0528",
    "meta-llama/Llama-3.1-8B-Instruct",
    "mistralai/Mistral-7B-Instruct-v0.3",
)

# ModelConfig keys coerced to float; unparseable values are dropped
NUMERIC_CONFIG_KEYS = ("temperature",)

# Returned by Hugging Face when the completion has no content
HF_EMPTY_RESPONSE = "Response was not returned"

# Linked gaming services (closed set)
INTEGRATION_SERVICES = ("steam", "epic", "playstation", "xbox")

# Human-readable timestamp on turns and integration records
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
