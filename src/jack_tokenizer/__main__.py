"""Allow ``python -m jack_tokenizer Main.jack``."""

from jack_tokenizer.cli.jacktok import main

if __name__ == "__main__":
    main()
