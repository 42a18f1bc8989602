from mp_mediator.demo.customers import main

if __name__ == "__main__":
    main()
