from c4minimax.cli import main

if __name__ == "__main__":
    main()
