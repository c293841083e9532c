"""Bundled model catalog.

Requirements are per quantization variant: ``vram_gb`` to run fully on the
GPU, ``ram_gb`` to run on the CPU from system memory.
"""

from __future__ import annotations

from typing import Optional

from ._types import ComputeRequirements, ModelDefinition, QuantizationOption

# ---------------------------------------------------------------------------
# The catalog
# ---------------------------------------------------------------------------

CATALOG: tuple[ModelDefinition, ...] = (
    # Llama
    ModelDefinition(
        name="Llama 3.1 8B",
        family="Llama",
        parameter_size="8B",
        parameters_billions=8.0,
        description=(
            "Meta's latest Llama 3.1 model with 8 billion parameters. Excellent "
            "for general-purpose tasks, coding, and conversational AI."
        ),
        license="Llama 3.1 Community License",
        url="https://huggingface.co/meta-llama/Meta-Llama-3.1-8B",
        tags=("chat", "coding", "general-purpose", "beginner-friendly"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 6, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 7, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 10, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "vLLM"),
        ),
    ),
    ModelDefinition(
        name="Llama 3.1 70B",
        family="Llama",
        parameter_size="70B",
        parameters_billions=70.0,
        description=(
            "Large Llama 3.1 model with exceptional reasoning and coding "
            "capabilities. Requires high-end hardware."
        ),
        license="Llama 3.1 Community License",
        url="https://huggingface.co/meta-llama/Meta-Llama-3.1-70B",
        tags=("chat", "coding", "reasoning", "advanced"),
        min_storage_gb=40,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 40, 80, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 50, 96, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 75, 128, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=16,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Mistral
    ModelDefinition(
        name="Mistral 7B",
        family="Mistral",
        parameter_size="7B",
        parameters_billions=7.3,
        description=(
            "Mistral AI's flagship 7B model. Excellent performance-to-size "
            "ratio, great for coding and general tasks."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Mistral-7B-v0.1",
        tags=("chat", "coding", "general-purpose", "efficient"),
        min_storage_gb=4,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 8, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 10, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ExLlama"),
        ),
    ),
    # Phi
    ModelDefinition(
        name="Phi-3 Mini 3.8B",
        family="Phi",
        parameter_size="3.8B",
        parameters_billions=3.8,
        description=(
            "Microsoft's compact yet powerful model. Excellent for devices with "
            "limited resources. Great reasoning capabilities."
        ),
        license="MIT",
        url="https://huggingface.co/microsoft/Phi-3-mini-4k-instruct",
        tags=("chat", "reasoning", "lightweight", "beginner-friendly", "efficient"),
        min_storage_gb=3,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 3, 6, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 4, 7, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 5, 8, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ONNX Runtime"),
        ),
    ),
    ModelDefinition(
        name="Phi-3 Medium 14B",
        family="Phi",
        parameter_size="14B",
        parameters_billions=14.0,
        description=(
            "Larger Phi-3 model with enhanced capabilities while maintaining "
            "efficiency. Great for mid-range systems."
        ),
        license="MIT",
        url="https://huggingface.co/microsoft/Phi-3-medium-4k-instruct",
        tags=("chat", "reasoning", "coding", "efficient"),
        min_storage_gb=10,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 10, 16, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 12, 20, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 16, 24, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=6,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ONNX Runtime"),
        ),
    ),
    # Gemma
    ModelDefinition(
        name="Gemma 2B",
        family="Gemma",
        parameter_size="2B",
        parameters_billions=2.0,
        description=(
            "Google's ultra-compact model. Perfect for low-resource "
            "environments and edge devices. Surprisingly capable."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-2b",
        tags=("chat", "lightweight", "beginner-friendly", "edge-device"),
        min_storage_gb=2,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 2, 4, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 2, 5, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 3, 6, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Gemma 7B",
        family="Gemma",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Google's 7B model with strong performance across various tasks. "
            "Good balance of capability and resource usage."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-7b",
        tags=("chat", "general-purpose", "efficient"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "TGI"),
        ),
    ),
    # Qwen
    ModelDefinition(
        name="Qwen2 7B",
        family="Qwen",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Alibaba's Qwen2 model with excellent multilingual support. Strong "
            "coding and math capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2-7B",
        tags=("chat", "coding", "multilingual", "math"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Llama
    ModelDefinition(
        name="CodeLlama 7B",
        family="Llama",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Meta's specialized model for code generation and understanding. "
            "Excellent for programming tasks."
        ),
        license="Llama 2 Community License",
        url="https://huggingface.co/codellama/CodeLlama-7b-hf",
        tags=("coding", "code-completion", "specialized"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "vLLM"),
        ),
    ),
    # DeepSeek
    ModelDefinition(
        name="DeepSeek Coder 6.7B",
        family="DeepSeek",
        parameter_size="6.7B",
        parameters_billions=6.7,
        description=(
            "DeepSeek's coding-focused model. Excellent for code generation, "
            "debugging, and technical tasks."
        ),
        license="MIT",
        url="https://huggingface.co/deepseek-ai/deepseek-coder-6.7b-base",
        tags=("coding", "technical", "specialized"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM"),
        ),
    ),
    # Llama
    ModelDefinition(
        name="Llama 3.1 405B",
        family="Llama",
        parameter_size="405B",
        parameters_billions=405.0,
        description=(
            "Meta's largest Llama 3.1 model with exceptional capabilities. "
            "Requires enterprise-grade hardware with multiple high-end GPUs."
        ),
        license="Llama 3.1 Community License",
        url="https://huggingface.co/meta-llama/Meta-Llama-3.1-405B",
        tags=("chat", "coding", "reasoning", "research", "enterprise"),
        min_storage_gb=250,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 200, 400, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 250, 450, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 350, 512, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="8.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=32,
            supported_backends=("vLLM", "TGI", "DeepSpeed"),
        ),
    ),
    ModelDefinition(
        name="Llama 3.2 1B",
        family="Llama",
        parameter_size="1B",
        parameters_billions=1.0,
        description=(
            "Ultra-lightweight Llama 3.2 model for edge devices and mobile. "
            "Great for on-device AI applications."
        ),
        license="Llama 3.2 Community License",
        url="https://huggingface.co/meta-llama/Llama-3.2-1B",
        tags=("chat", "lightweight", "edge-device", "mobile"),
        min_storage_gb=1,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 1, 2, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 1, 3, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 2, 4, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Llama 3.2 3B",
        family="Llama",
        parameter_size="3B",
        parameters_billions=3.0,
        description=(
            "Compact Llama 3.2 model balancing performance and efficiency. "
            "Ideal for resource-constrained environments."
        ),
        license="Llama 3.2 Community License",
        url="https://huggingface.co/meta-llama/Llama-3.2-3B",
        tags=("chat", "lightweight", "efficient", "beginner-friendly"),
        min_storage_gb=2,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 2, 4, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 3, 6, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 4, 8, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="CodeLlama 13B",
        family="Llama",
        parameter_size="13B",
        parameters_billions=13.0,
        description=(
            "Mid-size CodeLlama with enhanced code understanding and generation "
            "capabilities."
        ),
        license="Llama 2 Community License",
        url="https://huggingface.co/codellama/CodeLlama-13b-hf",
        tags=("coding", "code-completion", "specialized"),
        min_storage_gb=8,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 8, 16, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 10, 20, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 14, 28, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "vLLM"),
        ),
    ),
    ModelDefinition(
        name="CodeLlama 34B",
        family="Llama",
        parameter_size="34B",
        parameters_billions=34.0,
        description=(
            "Large CodeLlama model with professional-grade coding capabilities. "
            "Excellent for complex projects."
        ),
        license="Llama 2 Community License",
        url="https://huggingface.co/codellama/CodeLlama-34b-hf",
        tags=("coding", "code-completion", "specialized", "advanced"),
        min_storage_gb=20,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 20, 40, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 25, 50, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 35, 70, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Mistral
    ModelDefinition(
        name="Mixtral 8x7B",
        family="Mistral",
        parameter_size="8x7B (47B)",
        parameters_billions=47.0,
        description=(
            "Mistral's Mixture of Experts model with exceptional performance. "
            "Uses sparse activation for efficiency."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Mixtral-8x7B-v0.1",
        tags=("chat", "coding", "reasoning", "moe", "advanced"),
        min_storage_gb=30,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 30, 60, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 38, 75, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 50, 100, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=12,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Mixtral 8x22B",
        family="Mistral",
        parameter_size="8x22B (141B)",
        parameters_billions=141.0,
        description=(
            "Mistral's largest MoE model with state-of-the-art performance. "
            "Requires high-end hardware."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Mixtral-8x22B-v0.1",
        tags=("chat", "coding", "reasoning", "moe", "advanced", "research"),
        min_storage_gb=90,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 80, 160, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 100, 200, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 140, 280, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=24,
            supported_backends=("vLLM", "TGI", "llama.cpp"),
        ),
    ),
    # Phi
    ModelDefinition(
        name="Phi-3 Small 7B",
        family="Phi",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Microsoft's Phi-3 Small model with strong reasoning and general "
            "capabilities."
        ),
        license="MIT",
        url="https://huggingface.co/microsoft/Phi-3-small-8k-instruct",
        tags=("chat", "reasoning", "coding", "efficient"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ONNX Runtime"),
        ),
    ),
    # Gemma
    ModelDefinition(
        name="Gemma 9B",
        family="Gemma",
        parameter_size="9B",
        parameters_billions=9.0,
        description=(
            "Google's mid-size Gemma model with enhanced capabilities. Strong "
            "performance across various tasks."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-9b",
        tags=("chat", "coding", "general-purpose", "efficient"),
        min_storage_gb=6,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 6, 12, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 8, 16, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 11, 22, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Gemma 27B",
        family="Gemma",
        parameter_size="27B",
        parameters_billions=27.0,
        description=(
            "Google's large Gemma model with advanced reasoning and generation "
            "capabilities."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-27b",
        tags=("chat", "coding", "reasoning", "advanced"),
        min_storage_gb=16,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 16, 32, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 20, 40, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 28, 56, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Qwen
    ModelDefinition(
        name="Qwen2.5 0.5B",
        family="Qwen",
        parameter_size="0.5B",
        parameters_billions=0.5,
        description=(
            "Ultra-lightweight Qwen 2.5 model for edge devices. Surprisingly "
            "capable for its size."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2.5-0.5B",
        tags=("chat", "lightweight", "edge-device", "multilingual"),
        min_storage_gb=1,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 1, 2, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 1, 2, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 1, 3, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Qwen2.5 1.5B",
        family="Qwen",
        parameter_size="1.5B",
        parameters_billions=1.5,
        description=(
            "Compact Qwen 2.5 model with good multilingual support. Efficient "
            "for basic tasks."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2.5-1.5B",
        tags=("chat", "lightweight", "multilingual", "efficient"),
        min_storage_gb=1,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 1, 3, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 2, 4, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 2, 6, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Qwen2.5 3B",
        family="Qwen",
        parameter_size="3B",
        parameters_billions=3.0,
        description=(
            "Balanced Qwen 2.5 model with strong multilingual capabilities. "
            "Good for general tasks."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2.5-3B",
        tags=("chat", "coding", "multilingual", "efficient"),
        min_storage_gb=2,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 2, 4, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 3, 6, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 4, 8, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Qwen2.5 14B",
        family="Qwen",
        parameter_size="14B",
        parameters_billions=14.0,
        description=(
            "Mid-size Qwen 2.5 model with enhanced coding and reasoning "
            "capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2.5-14B",
        tags=("chat", "coding", "reasoning", "multilingual"),
        min_storage_gb=9,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 9, 18, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 11, 22, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 16, 32, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=6,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Qwen2.5 32B",
        family="Qwen",
        parameter_size="32B",
        parameters_billions=32.0,
        description=(
            "Large Qwen 2.5 model with professional-grade capabilities. "
            "Excellent for complex tasks."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2.5-32B",
        tags=("chat", "coding", "reasoning", "multilingual", "advanced"),
        min_storage_gb=18,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 18, 36, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 22, 48, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 32, 64, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Qwen2.5 72B",
        family="Qwen",
        parameter_size="72B",
        parameters_billions=72.0,
        description=(
            "Flagship Qwen 2.5 model with exceptional multilingual and coding "
            "abilities. Requires high-end hardware."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/Qwen/Qwen2.5-72B",
        tags=("chat", "coding", "reasoning", "multilingual", "advanced", "research"),
        min_storage_gb=42,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 42, 84, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 52, 100, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 80, 160, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=16,
            supported_backends=("vLLM", "TGI", "llama.cpp"),
        ),
    ),
    # DeepSeek
    ModelDefinition(
        name="DeepSeek Coder 1.3B",
        family="DeepSeek",
        parameter_size="1.3B",
        parameters_billions=1.3,
        description=(
            "Ultra-compact DeepSeek Coder. Great for quick code tasks on "
            "limited hardware."
        ),
        license="MIT",
        url="https://huggingface.co/deepseek-ai/deepseek-coder-1.3b-base",
        tags=("coding", "lightweight", "specialized"),
        min_storage_gb=1,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 1, 3, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 1, 4, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 2, 6, "Minimal", "Balanced"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="DeepSeek Coder 33B",
        family="DeepSeek",
        parameter_size="33B",
        parameters_billions=33.0,
        description=(
            "Large DeepSeek Coder with advanced code understanding. "
            "Professional-grade coding assistant."
        ),
        license="MIT",
        url="https://huggingface.co/deepseek-ai/deepseek-coder-33b-base",
        tags=("coding", "technical", "specialized", "advanced"),
        min_storage_gb=19,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 19, 38, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 24, 48, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 34, 68, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Yi
    ModelDefinition(
        name="Yi 6B",
        family="Yi",
        parameter_size="6B",
        parameters_billions=6.0,
        description=(
            "01.AI's compact model with strong bilingual (English/Chinese) "
            "capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/01-ai/Yi-6B",
        tags=("chat", "multilingual", "efficient"),
        min_storage_gb=4,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 4, 8, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 5, 10, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 7, 14, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "vLLM"),
        ),
    ),
    ModelDefinition(
        name="Yi 9B",
        family="Yi",
        parameter_size="9B",
        parameters_billions=9.0,
        description=(
            "01.AI's balanced model with enhanced capabilities and bilingual "
            "support."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/01-ai/Yi-9B",
        tags=("chat", "coding", "multilingual", "efficient"),
        min_storage_gb=6,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 6, 12, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 7, 14, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 10, 20, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Yi 34B",
        family="Yi",
        parameter_size="34B",
        parameters_billions=34.0,
        description=(
            "01.AI's large model with exceptional bilingual performance and "
            "reasoning abilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/01-ai/Yi-34B",
        tags=("chat", "coding", "reasoning", "multilingual", "advanced"),
        min_storage_gb=20,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 20, 40, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 25, 50, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 36, 72, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Command R
    ModelDefinition(
        name="Command R 35B",
        family="Command R",
        parameter_size="35B",
        parameters_billions=35.0,
        description=(
            "Cohere's Command R model optimized for RAG and enterprise use. "
            "Excellent at following instructions."
        ),
        license="CC-BY-NC-4.0",
        url="https://huggingface.co/CohereForAI/c4ai-command-r-v01",
        tags=("chat", "rag", "enterprise", "reasoning", "advanced"),
        min_storage_gb=20,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 20, 40, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 26, 52, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 38, 76, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Command R+ 104B",
        family="Command R",
        parameter_size="104B",
        parameters_billions=104.0,
        description=(
            "Cohere's flagship Command R+ model with state-of-the-art RAG and "
            "reasoning capabilities. Enterprise-grade."
        ),
        license="CC-BY-NC-4.0",
        url="https://huggingface.co/CohereForAI/c4ai-command-r-plus",
        tags=("chat", "rag", "enterprise", "reasoning", "advanced", "research"),
        min_storage_gb=60,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 60, 120, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 75, 150, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 110, 220, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=24,
            supported_backends=("vLLM", "TGI"),
        ),
    ),
    # Falcon
    ModelDefinition(
        name="Falcon 7B",
        family="Falcon",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "TII's Falcon model trained on high-quality data. Strong "
            "general-purpose capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/tiiuae/falcon-7b",
        tags=("chat", "general-purpose", "efficient"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 16, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Falcon 40B",
        family="Falcon",
        parameter_size="40B",
        parameters_billions=40.0,
        description=(
            "TII's large Falcon model with strong performance across diverse "
            "tasks. Trained on high-quality datasets."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/tiiuae/falcon-40b",
        tags=("chat", "coding", "reasoning", "advanced"),
        min_storage_gb=24,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 24, 48, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 30, 60, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 44, 88, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=12,
            supported_backends=("vLLM", "TGI", "llama.cpp"),
        ),
    ),
    ModelDefinition(
        name="Falcon 180B",
        family="Falcon",
        parameter_size="180B",
        parameters_billions=180.0,
        description=(
            "TII's largest Falcon model with exceptional capabilities. Requires "
            "enterprise-grade infrastructure."
        ),
        license="Falcon-180B TII License",
        url="https://huggingface.co/tiiuae/falcon-180B",
        tags=("chat", "coding", "reasoning", "research", "enterprise", "advanced"),
        min_storage_gb=100,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 100, 200, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 125, 250, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 180, 360, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="8.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=32,
            supported_backends=("vLLM", "TGI", "DeepSpeed"),
        ),
    ),
    ModelDefinition(
        name="Falcon 11B",
        family="Falcon",
        parameter_size="11B",
        parameters_billions=11.0,
        description=(
            "TII's mid-size Falcon model with balanced performance and "
            "efficiency."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/tiiuae/falcon-11b",
        tags=("chat", "coding", "efficient"),
        min_storage_gb=7,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, 7, 14, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 9, 18, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 13, 26, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Llama
    ModelDefinition(
        name="Llama 4 Scout 8B",
        family="Llama",
        parameter_size="8B",
        parameters_billions=8.0,
        description=(
            "Latest Llama 4 model for everyday tasks with improved efficiency."
        ),
        license="Llama 4 Community License",
        url="https://huggingface.co/meta-llama/Llama-4-Scout-8B",
        tags=("chat", "coding", "general-purpose", "beginner-friendly"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 5, 8, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 6, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 8, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 10, 16, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 16, 20, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "vLLM"),
        ),
    ),
    ModelDefinition(
        name="Llama 4 Maverick 70B",
        family="Llama",
        parameter_size="70B",
        parameters_billions=70.0,
        description=(
            "Advanced Llama 4 model with enhanced reasoning and coding "
            "capabilities."
        ),
        license="Llama 4 Community License",
        url="https://huggingface.co/meta-llama/Llama-4-Maverick-70B",
        tags=("chat", "coding", "reasoning", "advanced"),
        min_storage_gb=40,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 35, 60, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 40, 80, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 50, 96, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 75, 128, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 140, 175, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=16,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Llama 4 Behemoth 405B",
        family="Llama",
        parameter_size="405B",
        parameters_billions=405.0,
        description=(
            "Massive Llama 4 model with state-of-the-art capabilities. Requires "
            "enterprise infrastructure."
        ),
        license="Llama 4 Community License",
        url="https://huggingface.co/meta-llama/Llama-4-Behemoth-405B",
        tags=("chat", "coding", "reasoning", "research", "enterprise"),
        min_storage_gb=250,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 180, 320, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 200, 400, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 250, 450, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 350, 512, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 810, 1012, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="8.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=32,
            supported_backends=("vLLM", "TGI", "DeepSpeed"),
        ),
    ),
    # Mistral
    ModelDefinition(
        name="Mistral 7B v0.3",
        family="Mistral",
        parameter_size="7B",
        parameters_billions=7.3,
        description=(
            "Latest Mistral 7B iteration with improved instruction following "
            "and reduced hallucinations."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Mistral-7B-v0.3",
        tags=("chat", "coding", "general-purpose", "efficient"),
        min_storage_gb=4,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 6, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 8, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 10, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 15, 18, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ExLlama"),
        ),
    ),
    ModelDefinition(
        name="Mistral Small 22B",
        family="Mistral",
        parameter_size="22B",
        parameters_billions=22.0,
        description=(
            "Mistral's mid-size model with strong reasoning and coding "
            "capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Mistral-Small-22B",
        tags=("chat", "coding", "reasoning", "efficient"),
        min_storage_gb=13,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 11, 18, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 13, 26, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 17, 33, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 26, 44, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 44, 55, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Mistral Large 123B",
        family="Mistral",
        parameter_size="123B",
        parameters_billions=123.0,
        description=(
            "Mistral's flagship large model with state-of-the-art performance "
            "for enterprise applications."
        ),
        license="Mistral Research License",
        url="https://huggingface.co/mistralai/Mistral-Large-123B",
        tags=("chat", "coding", "reasoning", "enterprise", "advanced"),
        min_storage_gb=72,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 62, 100, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 72, 144, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 90, 185, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 140, 246, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 246, 308, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=24,
            supported_backends=("vLLM", "TGI", "DeepSpeed"),
        ),
    ),
    ModelDefinition(
        name="Ministral 3B",
        family="Mistral",
        parameter_size="3B",
        parameters_billions=3.0,
        description=(
            "Ultra-compact Mistral variant for edge devices and low-resource "
            "environments."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Ministral-3B",
        tags=("chat", "lightweight", "edge-device", "efficient"),
        min_storage_gb=2,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 2, 3, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 2, 4, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 3, 5, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 4, 8, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 6, 8, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Ministral 8B",
        family="Mistral",
        parameter_size="8B",
        parameters_billions=8.0,
        description=(
            "Compact Mistral model with enhanced efficiency and strong general "
            "capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/mistralai/Ministral-8B",
        tags=("chat", "coding", "efficient", "general-purpose"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 7, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 7, 12, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 10, 16, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 16, 20, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "vLLM"),
        ),
    ),
    # Phi
    ModelDefinition(
        name="Phi-3.5 Mini 3.8B",
        family="Phi",
        parameter_size="3.8B",
        parameters_billions=3.8,
        description=(
            "Microsoft's refined Phi-3.5 Mini with improved reasoning and "
            "multilingual support."
        ),
        license="MIT",
        url="https://huggingface.co/microsoft/Phi-3.5-mini-instruct",
        tags=("chat", "reasoning", "lightweight", "beginner-friendly", "efficient"),
        min_storage_gb=3,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 2, 4, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 3, 6, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 4, 7, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 5, 8, "Minimal", "Balanced"),
            QuantizationOption("FP16", 16, 8, 10, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ONNX Runtime"),
        ),
    ),
    ModelDefinition(
        name="Phi-3.5 MoE 16x3.8B",
        family="Phi",
        parameter_size="16x3.8B (42B)",
        parameters_billions=42.0,
        description=(
            "Microsoft's Mixture of Experts Phi model with sparse activation "
            "for efficiency."
        ),
        license="MIT",
        url="https://huggingface.co/microsoft/Phi-3.5-MoE-instruct",
        tags=("chat", "reasoning", "coding", "moe", "efficient"),
        min_storage_gb=25,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 22, 36, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 25, 50, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 32, 63, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 50, 84, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 84, 105, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=12,
            supported_backends=("vLLM", "TGI", "llama.cpp"),
        ),
    ),
    ModelDefinition(
        name="Phi-4 14B",
        family="Phi",
        parameter_size="14B",
        parameters_billions=14.0,
        description=(
            "Microsoft's latest Phi-4 with enhanced reasoning, coding, and "
            "multilingual capabilities."
        ),
        license="MIT",
        url="https://huggingface.co/microsoft/Phi-4",
        tags=("chat", "reasoning", "coding", "math", "efficient"),
        min_storage_gb=9,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 7, 12, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 9, 18, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 12, 21, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 16, 28, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 28, 35, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=6,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "ONNX Runtime", "vLLM"),
        ),
    ),
    # Gemma
    ModelDefinition(
        name="Gemma 2 2B",
        family="Gemma",
        parameter_size="2B",
        parameters_billions=2.0,
        description=(
            "Google's enhanced Gemma 2 ultra-compact model with improved "
            "efficiency."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-2-2b",
        tags=("chat", "lightweight", "beginner-friendly", "edge-device"),
        min_storage_gb=2,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 1, 3, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 2, 4, "Low", "Very Fast"),
            QuantizationOption("Q5_K_M", 5, 2, 5, "Very Low", "Fast"),
            QuantizationOption("Q8_0", 8, 3, 6, "Minimal", "Balanced"),
            QuantizationOption("FP16", 16, 4, 5, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="5.0",
            requires_avx2=False,
            benefits_from_avx512=False,
            min_cores=2,
            supported_backends=("llama.cpp", "Ollama", "LM Studio"),
        ),
    ),
    ModelDefinition(
        name="Gemma 2 9B",
        family="Gemma",
        parameter_size="9B",
        parameters_billions=9.0,
        description=(
            "Google's Gemma 2 with balanced performance and enhanced "
            "instruction following."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-2-9b",
        tags=("chat", "coding", "general-purpose", "efficient"),
        min_storage_gb=6,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 5, 8, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 6, 12, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 8, 14, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 11, 18, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 18, 23, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "LM Studio", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Gemma 2 27B",
        family="Gemma",
        parameter_size="27B",
        parameters_billions=27.0,
        description=(
            "Google's large Gemma 2 with advanced capabilities for complex "
            "tasks."
        ),
        license="Gemma Terms of Use",
        url="https://huggingface.co/google/gemma-2-27b",
        tags=("chat", "coding", "reasoning", "advanced"),
        min_storage_gb=16,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 13, 22, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 16, 32, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 20, 40, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 28, 54, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 54, 68, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # DeepSeek
    ModelDefinition(
        name="DeepSeek-V3 671B",
        family="DeepSeek",
        parameter_size="671B (MoE)",
        parameters_billions=671.0,
        description=(
            "DeepSeek's massive Mixture of Experts model with exceptional "
            "coding and reasoning capabilities."
        ),
        license="MIT",
        url="https://huggingface.co/deepseek-ai/DeepSeek-V3",
        tags=("chat", "coding", "reasoning", "moe", "research", "enterprise"),
        min_storage_gb=320,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 280, 470, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 320, 640, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 400, 800, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 540, 1342, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="8.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=64,
            supported_backends=("vLLM", "TGI", "DeepSpeed"),
        ),
    ),
    ModelDefinition(
        name="DeepSeek-Coder-V2 236B",
        family="DeepSeek",
        parameter_size="236B (MoE)",
        parameters_billions=236.0,
        description=(
            "DeepSeek's advanced coding model with MoE architecture for "
            "professional development tasks."
        ),
        license="MIT",
        url="https://huggingface.co/deepseek-ai/DeepSeek-Coder-V2-236B",
        tags=("coding", "technical", "moe", "advanced", "specialized"),
        min_storage_gb=130,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 110, 165, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 130, 260, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 162, 354, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 236, 472, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="8.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=32,
            supported_backends=("vLLM", "TGI", "DeepSpeed"),
        ),
    ),
    ModelDefinition(
        name="DeepSeek-R1 70B",
        family="DeepSeek",
        parameter_size="70B",
        parameters_billions=70.0,
        description=(
            "DeepSeek's reasoning-focused model with enhanced chain-of-thought "
            "capabilities."
        ),
        license="MIT",
        url="https://huggingface.co/deepseek-ai/DeepSeek-R1-70B",
        tags=("reasoning", "math", "coding", "advanced", "research"),
        min_storage_gb=42,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 35, 60, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 42, 84, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 52, 105, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 80, 140, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 140, 175, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=16,
            supported_backends=("vLLM", "TGI", "llama.cpp"),
        ),
    ),
    # Nemotron
    ModelDefinition(
        name="Nemotron-4 340B",
        family="Nemotron",
        parameter_size="340B",
        parameters_billions=340.0,
        description=(
            "NVIDIA's flagship enterprise model optimized for RAG and synthetic "
            "data generation."
        ),
        license="NVIDIA Open Model License",
        url="https://huggingface.co/nvidia/Nemotron-4-340B",
        tags=("chat", "rag", "enterprise", "reasoning", "advanced"),
        min_storage_gb=180,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 160, 240, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 180, 360, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 225, 510, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 340, 680, "Minimal", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="8.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=32,
            supported_backends=("vLLM", "TGI", "Triton"),
        ),
    ),
    ModelDefinition(
        name="Nemotron Mini 4B",
        family="Nemotron",
        parameter_size="4B",
        parameters_billions=4.0,
        description=(
            "NVIDIA's compact Nemotron model optimized for edge deployment and "
            "low-latency inference."
        ),
        license="NVIDIA Open Model License",
        url="https://huggingface.co/nvidia/Nemotron-Mini-4B",
        tags=("chat", "edge-device", "efficient", "lightweight"),
        min_storage_gb=3,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 2, 4, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 3, 6, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 4, 8, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 6, 10, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 8, 10, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "Triton", "TensorRT-LLM"),
        ),
    ),
    # Orca
    ModelDefinition(
        name="Orca 2 7B",
        family="Orca",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Microsoft's Orca 2 model trained with advanced reasoning "
            "techniques for complex problem solving."
        ),
        license="Microsoft Research License",
        url="https://huggingface.co/microsoft/Orca-2-7b",
        tags=("reasoning", "chat", "math", "efficient"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 7, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 11, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 14, 18, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Orca 2 13B",
        family="Orca",
        parameter_size="13B",
        parameters_billions=13.0,
        description=(
            "Microsoft's mid-size Orca 2 with enhanced reasoning and "
            "step-by-step problem solving capabilities."
        ),
        license="Microsoft Research License",
        url="https://huggingface.co/microsoft/Orca-2-13b",
        tags=("reasoning", "chat", "math", "coding", "advanced"),
        min_storage_gb=8,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 7, 11, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 8, 16, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 10, 20, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 14, 26, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 26, 33, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=6,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Nous Hermes
    ModelDefinition(
        name="Nous Hermes 2 Mixtral 8x7B",
        family="Nous Hermes",
        parameter_size="8x7B (47B)",
        parameters_billions=47.0,
        description=(
            "NousResearch's fine-tuned Mixtral model with enhanced instruction "
            "following and roleplay capabilities."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/NousResearch/Nous-Hermes-2-Mixtral-8x7B",
        tags=("chat", "roleplay", "coding", "moe", "advanced"),
        min_storage_gb=30,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 26, 42, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 30, 60, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 38, 71, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 50, 94, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 94, 118, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="7.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=12,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="Nous Hermes 2 Yi 34B",
        family="Nous Hermes",
        parameter_size="34B",
        parameters_billions=34.0,
        description=(
            "NousResearch's fine-tuned Yi 34B model with improved instruction "
            "following and multilingual support."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/NousResearch/Nous-Hermes-2-Yi-34B",
        tags=("chat", "coding", "multilingual", "roleplay", "advanced"),
        min_storage_gb=20,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 17, 28, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 20, 40, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 25, 51, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 36, 68, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 68, 85, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # WizardLM
    ModelDefinition(
        name="WizardLM 2 7B",
        family="WizardLM",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Microsoft's WizardLM 2 trained with Evol-Instruct for complex "
            "instruction following."
        ),
        license="Microsoft Research License",
        url="https://huggingface.co/WizardLM/WizardLM-2-7B",
        tags=("chat", "reasoning", "coding", "instruction-following"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 7, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 11, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 14, 18, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    ModelDefinition(
        name="WizardCoder 33B",
        family="WizardLM",
        parameter_size="33B",
        parameters_billions=33.0,
        description=(
            "Microsoft's specialized coding model with enhanced code generation "
            "and debugging capabilities."
        ),
        license="Microsoft Research License",
        url="https://huggingface.co/WizardLM/WizardCoder-33B-V1.1",
        tags=("coding", "specialized", "debugging", "advanced"),
        min_storage_gb=19,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 16, 26, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 19, 38, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 24, 50, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 34, 66, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 66, 83, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=8,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Solar
    ModelDefinition(
        name="Solar 10.7B",
        family="Solar",
        parameter_size="10.7B",
        parameters_billions=10.7,
        description=(
            "Upstage's Solar model using depth-up scaling for enhanced "
            "performance in a compact size."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/upstage/SOLAR-10.7B-v1.0",
        tags=("chat", "coding", "efficient", "general-purpose"),
        min_storage_gb=7,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 6, 10, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 7, 14, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 9, 16, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 13, 21, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 21, 27, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Starling
    ModelDefinition(
        name="Starling 7B Alpha",
        family="Starling",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Berkeley's Starling model trained with RLAIF for improved "
            "helpfulness and harmlessness."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/berkeley-nest/Starling-LM-7B-alpha",
        tags=("chat", "helpful", "safe", "general-purpose"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 7, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 11, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 14, 18, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Openchat
    ModelDefinition(
        name="Openchat 3.5",
        family="Openchat",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "Open-source chatbot trained with C-RLFT for GPT-4 level "
            "conversational performance."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/openchat/openchat-3.5-0106",
        tags=("chat", "conversational", "efficient", "general-purpose"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 7, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 11, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 14, 18, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
    # Zephyr
    ModelDefinition(
        name="Zephyr 7B Beta",
        family="Zephyr",
        parameter_size="7B",
        parameters_billions=7.0,
        description=(
            "HuggingFace's Zephyr model fine-tuned with DPO for improved "
            "alignment and helpfulness."
        ),
        license="Apache 2.0",
        url="https://huggingface.co/HuggingFaceH4/zephyr-7b-beta",
        tags=("chat", "helpful", "aligned", "general-purpose"),
        min_storage_gb=5,
        quantization_options=(
            QuantizationOption("Q2_K", 2, 4, 7, "Medium", "Very Fast"),
            QuantizationOption("Q4_K_M", 4, 5, 10, "Low", "Fast"),
            QuantizationOption("Q5_K_M", 5, 6, 11, "Very Low", "Balanced"),
            QuantizationOption("Q8_0", 8, 8, 14, "Minimal", "High Quality"),
            QuantizationOption("FP16", 16, 14, 18, "None", "Maximum Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=False,
            min_cores=4,
            supported_backends=("llama.cpp", "Ollama", "vLLM", "TGI"),
        ),
    ),
)


def list_models() -> list[str]:
    """Return all bundled model names."""
    return [m.name for m in CATALOG]


def get_model(name: str) -> Optional[ModelDefinition]:
    """Case-insensitive lookup of a bundled model."""
    lowered = name.lower()
    for model in CATALOG:
        if model.name.lower() == lowered:
            return model
    return None


def list_families() -> list[str]:
    return sorted({m.family for m in CATALOG})
