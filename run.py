import signal
import sys
import yaml

from eventlet import GreenPool

from procroute.dumper import RouteDumper


def printmsg(msg):
    sys.stderr.write("%s\n" % msg)
    sys.stderr.flush()


class Server():
    def __init__(self, config_path):
        self.config_path = config_path
        self.pool = None
        self.dumpers = []
        self.greenlets = []

    def run(self):
        signal.signal(signal.SIGINT, self.signal_handler)
        self.pool = GreenPool()

        with open(self.config_path) as file:
            config = yaml.safe_load(file.read())
        for table in config["tables"]:
            printmsg("Reading routes from %s" % table["path"])
            dumper = RouteDumper(
                table["path"],
                self.route_handler,
                self.error_handler,
                strict=table.get("strict", False)
            )
            self.dumpers.append(dumper)
            self.greenlets.append(self.pool.spawn(self.dump, dumper))
        self.pool.waitall()
        printmsg("All tables read, exiting")

    def dump(self, dumper):
        count = dumper.run()
        printmsg("[Done] %s: %d routes" % (dumper, count))

    def signal_handler(self, _signal, _frame):
        printmsg("[SIGINT] Shutting down")
        self.shutdown()

    def shutdown(self):
        for greenlet in self.greenlets:
            greenlet.kill()

    def error_handler(self, msg):  # pylint: disable=no-self-use
        printmsg("[Error] %s" % msg)

    def route_handler(self, route):  # pylint: disable=no-self-use
        printmsg("[Route] %s" % route)


if __name__ == "__main__":
    server = Server(sys.argv[1] if len(sys.argv) > 1 else "procroute.yaml")
    server.run()
