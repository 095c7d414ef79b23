from jdtls_volt.main import main

if __name__ == "__main__":
    main()
