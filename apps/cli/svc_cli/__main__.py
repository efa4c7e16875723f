from svc_cli.main import main

main()
