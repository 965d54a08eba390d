"""Allow ``python -m prompt_optimizer``."""

from prompt_optimizer.main import main

main()
