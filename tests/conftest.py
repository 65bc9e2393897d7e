"""Configuração do pytest para o serviço de endpoints de notificação."""

import os
import sys
from pathlib import Path

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Ambiente de teste: store em memória e logging em texto
os.environ.setdefault("ENVIRONMENT", "test")
