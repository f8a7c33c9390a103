from system_css.cli.main import main

if __name__ == "__main__":
    main(prog_name="system-css")
